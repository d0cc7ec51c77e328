"""
export_thread.py - Worker thread for asynchronous render + export with progress
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal

from config import EXPORT
from fullcut.application.services import ExportService
from fullcut.domain.models import RegionSet, SampleBuffer
from fullcut.infrastructure.audio import kept_regions, render

logger = logging.getLogger(__name__)


class ExportThread(QThread):
    """Worker thread that renders, encodes and saves the edited audio."""

    progress_updated = Signal(int, str)  # progress percentage, message
    export_completed = Signal(dict)  # export_info dictionary
    export_failed = Signal(str)  # error message

    def __init__(
        self,
        buffer: SampleBuffer,
        region_set: RegionSet,
        output_path: Path,
        source_path: Optional[Path] = None,
        export_service: Optional[ExportService] = None
    ):
        super().__init__()
        # Snapshot: later edits in the session do not affect this export
        self.buffer = buffer
        self.region_set = region_set
        self.output_path = Path(output_path)
        self.source_path = Path(source_path) if source_path is not None else None
        self.export_service = export_service or ExportService()
        self._is_cancelled = False

    def run(self):
        """Run the export."""
        try:
            logger.info(f"Starting export thread: {len(self.region_set)} regions -> {self.output_path}")

            self.progress_updated.emit(EXPORT.Progress.PREPARE, "Computing kept regions...")
            keep = kept_regions(self.region_set, self.buffer.duration)

            self.progress_updated.emit(EXPORT.Progress.RENDER, f"Splicing {len(keep)} kept regions...")
            rendered = render(self.buffer, keep)

            if self._is_cancelled:
                return

            self.progress_updated.emit(EXPORT.Progress.ENCODE, "Encoding WAV...")
            data = self.export_service.encoder.encode(rendered)

            if self._is_cancelled:
                return

            self.progress_updated.emit(EXPORT.Progress.SAVE, f"Writing {self.output_path.name}...")
            written = self.export_service.save(
                data,
                self.output_path,
                source_path=self.source_path,
                expected=rendered,
            )

            export_info = {
                'output_path': str(written),
                'bytes': len(data),
                'kept_regions': len(keep),
                'deleted_regions': len(self.region_set),
                'source_duration': self.buffer.duration,
                'output_duration': rendered.duration,
            }

            self.progress_updated.emit(
                EXPORT.Progress.COMPLETED,
                f"Export completed: {rendered.duration:.2f}s written"
            )
            self.export_completed.emit(export_info)

        except Exception as e:
            logger.error(f"Export thread failed: {e}", exc_info=True)
            self.export_failed.emit(f"Export failed: {e}")

    def cancel(self):
        """Stop before writing; a render in progress still runs to completion."""
        self._is_cancelled = True
