"""
Domain models for Audio Full Cut.
"""

from .region import Region, RegionSet, EMPTY_REGION_SET, merge_regions, subtract_region
from .sample_buffer import SampleBuffer

__all__ = [
    "Region",
    "RegionSet",
    "EMPTY_REGION_SET",
    "merge_regions",
    "subtract_region",
    "SampleBuffer",
]
