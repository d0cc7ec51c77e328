from .edit_service import EditService
from .export_service import ExportService

__all__ = ["EditService", "ExportService"]
