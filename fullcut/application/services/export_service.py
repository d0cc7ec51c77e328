"""
ExportService - Renders, encodes and persists the edited audio.
"""

import logging
from pathlib import Path
from typing import Optional

import soundfile as sf

from config import EXPORT
from fullcut.domain.exceptions import ExportError
from fullcut.domain.interfaces import IAudioEncoder
from fullcut.domain.models import RegionSet, SampleBuffer
from fullcut.infrastructure.audio import PcmWavEncoder, splice

logger = logging.getLogger(__name__)


class ExportService:
    """
    Persistence collaborator for exports.

    The engine produces bytes; this service decides where they go, writes
    them and verifies the written file. It refuses to overwrite the source.
    """

    def __init__(self, encoder: Optional[IAudioEncoder] = None):
        """
        Args:
            encoder: Output encoder (default PcmWavEncoder)
        """
        self.encoder = encoder or PcmWavEncoder()

    def render_to_bytes(self, buffer: SampleBuffer, region_set: RegionSet) -> bytes:
        """Splice out ``region_set`` and encode the result."""
        return self.encoder.encode(splice(buffer, region_set))

    def save(
        self,
        data: bytes,
        output_path: Path,
        source_path: Optional[Path] = None,
        expected: Optional[SampleBuffer] = None
    ) -> Path:
        """
        Write encoded audio and verify it.

        Args:
            data: Encoded file contents
            output_path: Destination
            source_path: Source file, never overwritten
            expected: Rendered buffer to verify sample rate, channels and frames against

        Returns:
            The written path

        Raises:
            ExportError: Destination is the source, not writable, or verification failed
        """
        output_path = Path(output_path)

        if source_path is not None and self._same_file(output_path, Path(source_path)):
            raise ExportError(EXPORT.Errors.SOURCE_OVERWRITE.format(path=output_path))

        if not self.validate_export_folder(output_path.parent):
            raise ExportError(EXPORT.Errors.FOLDER_NOT_WRITABLE.format(folder=output_path.parent))

        if output_path.exists():
            logger.debug(f"Overwriting existing file: {output_path.name}")

        try:
            output_path.write_bytes(data)
        except OSError as e:
            raise ExportError(EXPORT.Errors.WRITE_FAILED.format(path=output_path, error=e)) from e

        self._verify(output_path, expected)

        logger.info(f"✓ Exported: {output_path} ({len(data)} bytes)")
        return output_path

    def validate_export_folder(self, folder: Path) -> bool:
        """Check that a folder exists (creating it) and accepts writes."""
        folder = Path(folder)
        try:
            folder.mkdir(parents=True, exist_ok=True)

            # Write test
            test_file = folder / ".fullcut_write_test.tmp"
            test_file.write_text("test")
            test_file.unlink()

            return True

        except OSError as e:
            logger.error(f"Output folder is not writable: {e}")
            return False

    @staticmethod
    def default_output_path(source_path: Path, output_folder: Optional[Path] = None) -> Path:
        """interview.flac -> interview_cut.wav, next to the source unless a folder is given."""
        source_path = Path(source_path)
        stem = source_path.stem or EXPORT.FileNaming.DEFAULT_STEM
        folder = Path(output_folder) if output_folder is not None else source_path.parent
        return folder / EXPORT.FileNaming.FILENAME_PATTERN.format(stem=stem)

    def _verify(self, output_path: Path, expected: Optional[SampleBuffer]):
        """Read the header back and compare with the rendered buffer."""
        if output_path.stat().st_size < EXPORT.Wav.HEADER_SIZE:
            raise ExportError(EXPORT.Errors.VERIFY_FAILED.format(reason="file shorter than header"))

        try:
            info = sf.info(str(output_path))
        except RuntimeError as e:
            raise ExportError(EXPORT.Errors.VERIFY_FAILED.format(reason=e)) from e

        if info.subtype != EXPORT.Wav.SUBTYPE:
            raise ExportError(EXPORT.Errors.VERIFY_FAILED.format(reason=f"subtype {info.subtype}"))

        if expected is None:
            return

        mismatches = []
        if info.samplerate != expected.sample_rate:
            mismatches.append(f"sample rate {info.samplerate} != {expected.sample_rate}")
        if info.channels != expected.channels:
            mismatches.append(f"channels {info.channels} != {expected.channels}")
        if info.frames != expected.frames:
            mismatches.append(f"frames {info.frames} != {expected.frames}")

        if mismatches:
            raise ExportError(EXPORT.Errors.VERIFY_FAILED.format(reason="; ".join(mismatches)))

    @staticmethod
    def _same_file(a: Path, b: Path) -> bool:
        try:
            return a.resolve() == b.resolve()
        except OSError:
            return False
