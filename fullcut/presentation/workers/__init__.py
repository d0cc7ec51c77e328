from .detection_thread import DetectionThread
from .export_thread import ExportThread

__all__ = ["DetectionThread", "ExportThread"]
