"""
EditPresenter - Presentation logic for the editing session.

Responsibilities:
- Loading files into the EditService (resetting or restoring regions)
- Forwarding mark / erase gestures and publishing the region list
- Starting detection and export on worker threads
"""

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from fullcut.application.services import EditService, ExportService
from fullcut.domain.exceptions import FullCutError
from fullcut.domain.interfaces import IAudioFileLoader, IRegionRepository
from fullcut.domain.models import Region
from fullcut.infrastructure.audio import AudioFileLoader
from fullcut.infrastructure.persistence import JsonRegionRepository
from fullcut.presentation.workers import DetectionThread, ExportThread

logger = logging.getLogger(__name__)


class EditPresenter(QObject):
    """
    Presenter for one editing session.

    Separates the session logic from whatever view draws the waveform.
    """

    # Signals
    buffer_loaded = Signal(dict)  # session summary
    regions_changed = Signal(list)  # list of {"start", "end"} dicts
    edit_error = Signal(str)  # error message

    def __init__(
        self,
        edit_service: Optional[EditService] = None,
        audio_loader: Optional[IAudioFileLoader] = None,
        repository: Optional[IRegionRepository] = None,
        export_service: Optional[ExportService] = None
    ):
        """
        Args:
            edit_service: Optional EditService, default created if None
            audio_loader: Optional loader, default AudioFileLoader
            repository: Optional region sidecar repository, default JsonRegionRepository
            export_service: Optional ExportService, default created if None
        """
        super().__init__()

        self.edit_service = edit_service or EditService()
        self.audio_loader = audio_loader or AudioFileLoader()
        self.repository = repository or JsonRegionRepository()
        self.export_service = export_service or ExportService()

        self.current_path: Optional[Path] = None
        self._threads: List = []

    # === File lifecycle ===

    def load_file(self, file_path: Path, restore_regions: bool = False) -> bool:
        """
        Decode a file and open it in the session.

        Args:
            file_path: Audio file
            restore_regions: Opt in to restoring regions saved for this file;
                by default every opened file starts with no regions

        Returns:
            True if the file was opened
        """
        file_path = Path(file_path)
        buffer = self.audio_loader.load(file_path)
        if buffer is None:
            self.edit_error.emit(f"Cannot decode audio file: {file_path.name}")
            return False

        self.edit_service.open_buffer(buffer, source_name=file_path.name)
        self.current_path = file_path

        if restore_regions:
            stored = self.repository.load(file_path)
            if stored:
                self.edit_service.set_region_set(stored)
                logger.info(f"Restored {len(self.edit_service.region_set)} regions for {file_path.name}")

        self.buffer_loaded.emit(self.edit_service.get_summary())
        self._publish_regions()
        return True

    def close_file(self, save_regions: bool = False):
        """Close the current file; ``save_regions`` stores its regions first."""
        if self.current_path is not None and save_regions:
            self.save_regions()
        self.edit_service.close()
        self.current_path = None
        self._publish_regions()
        logger.info("File closed")

    def save_regions(self) -> bool:
        """Store the current regions in the sidecar repository."""
        if self.current_path is None or not self.edit_service.has_buffer:
            self.edit_error.emit("No file to save regions for")
            return False

        saved = self.repository.save(
            self.current_path,
            self.edit_service.region_set,
            self.edit_service.duration,
        )
        if not saved:
            self.edit_error.emit("Failed to save regions")
        return saved

    # === Editing ===

    def mark_region(self, start: float, end: float):
        """Forward a mark gesture."""
        self._edit(self.edit_service.mark_region, start, end)

    def erase_region(self, start: float, end: float):
        """Forward an erase gesture."""
        self._edit(self.edit_service.erase_region, start, end)

    def clear_regions(self):
        self.edit_service.clear_regions()
        self._publish_regions()

    def apply_proposals(self, proposals: List[Region]):
        """Merge detector proposals into the session."""
        try:
            self.edit_service.apply_regions(proposals)
        except FullCutError as e:
            logger.error(f"Cannot apply proposals: {e}")
            self.edit_error.emit(str(e))
            return
        self._publish_regions()

    # === Workers ===

    def start_detection(
        self,
        threshold: Optional[float] = None,
        min_duration: Optional[float] = None,
        padding: Optional[float] = None,
        auto_apply: bool = True
    ) -> Optional[DetectionThread]:
        """
        Start silence detection on a worker thread.

        Returns:
            The started thread, or None when no file is loaded
        """
        if not self.edit_service.has_buffer:
            self.edit_error.emit("No audio is loaded")
            return None

        thread = DetectionThread(self.edit_service, threshold, min_duration, padding)
        if auto_apply:
            thread.detection_completed.connect(self.apply_proposals)
        thread.detection_failed.connect(self.edit_error)
        self._track(thread)
        thread.start()
        return thread

    def start_export(self, output_path: Optional[Path] = None) -> Optional[ExportThread]:
        """
        Start an export of the current session on a worker thread.

        Args:
            output_path: Destination (default: <stem>_cut.wav next to the source)

        Returns:
            The started thread, or None when nothing can be exported
        """
        if not self.edit_service.has_buffer:
            self.edit_error.emit("No audio is loaded")
            return None

        if output_path is None:
            if self.current_path is None:
                self.edit_error.emit("No output path given")
                return None
            output_path = self.export_service.default_output_path(self.current_path)

        thread = ExportThread(
            self.edit_service.buffer,
            self.edit_service.region_set,
            output_path,
            source_path=self.current_path,
            export_service=self.export_service,
        )
        thread.export_failed.connect(self.edit_error)
        self._track(thread)
        thread.start()
        return thread

    def get_summary(self) -> dict:
        """Summary of the current session."""
        return self.edit_service.get_summary()

    # === Helpers ===

    def _edit(self, operation, start: float, end: float):
        try:
            operation(start, end)
        except FullCutError as e:
            logger.error(f"Edit failed: {e}")
            self.edit_error.emit(str(e))
            return
        self._publish_regions()

    def _publish_regions(self):
        self.regions_changed.emit(self.edit_service.region_set.to_list())

    def _track(self, thread):
        """Keep a reference until the thread finishes."""
        self._threads.append(thread)
        thread.finished.connect(lambda: self._threads.remove(thread) if thread in self._threads else None)
