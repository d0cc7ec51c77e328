from .region_repository_impl import JsonRegionRepository

__all__ = ["JsonRegionRepository"]
