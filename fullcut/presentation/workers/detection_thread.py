"""
detection_thread.py - Worker thread for silence detection off the UI thread
"""

import logging
from typing import Optional

from PySide6.QtCore import QThread, Signal

from config import EXPORT
from fullcut.application.services import EditService

logger = logging.getLogger(__name__)


class DetectionThread(QThread):
    """
    Runs EditService.detect_silence in a worker thread.

    Detection itself cannot be interrupted; ``cancel`` only makes the thread
    discard the result instead of emitting it.
    """

    progress_updated = Signal(int, str)  # progress percentage, message
    detection_completed = Signal(object)  # List[Region]
    detection_failed = Signal(str)  # error message

    def __init__(
        self,
        edit_service: EditService,
        threshold: Optional[float] = None,
        min_duration: Optional[float] = None,
        padding: Optional[float] = None
    ):
        super().__init__()
        self.edit_service = edit_service
        self.threshold = threshold
        self.min_duration = min_duration
        self.padding = padding
        self._is_cancelled = False

    def run(self):
        """Run detection and emit the proposals."""
        try:
            self.progress_updated.emit(EXPORT.Progress.DETECT_START, "Detecting silence...")

            proposals = self.edit_service.detect_silence(
                threshold=self.threshold,
                min_duration=self.min_duration,
                padding=self.padding,
            )

            if self._is_cancelled:
                logger.info("Detection finished after cancel - result discarded")
                return

            self.progress_updated.emit(EXPORT.Progress.COMPLETED, f"Found {len(proposals)} silent regions")
            self.detection_completed.emit(proposals)

        except Exception as e:
            logger.error(f"Detection thread failed: {e}", exc_info=True)
            self.detection_failed.emit(f"Silence detection failed: {e}")

    def cancel(self):
        """Discard the result when detection finishes."""
        self._is_cancelled = True
