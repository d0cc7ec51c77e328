"""
EditService - Editing session: owns the source buffer and the marked regions.
"""

import logging
from typing import Iterable, List, Optional

from config import EXPORT
from fullcut.domain.exceptions import NoBufferLoadedError
from fullcut.domain.interfaces import IAudioEncoder, ISilenceDetector
from fullcut.domain.models import EMPTY_REGION_SET, Region, RegionSet, SampleBuffer
from fullcut.infrastructure.audio import PcmWavEncoder, RmsSilenceDetector
from fullcut.infrastructure.audio import splicer

logger = logging.getLogger(__name__)


class EditService:
    """
    Application service holding the mutable state of one editing session.

    The engine underneath is pure; this class is the only place where the
    current buffer and RegionSet change. Opening a new buffer resets the
    regions. The source buffer is never modified or written back.
    """

    def __init__(
        self,
        detector: Optional[ISilenceDetector] = None,
        encoder: Optional[IAudioEncoder] = None
    ):
        """
        Args:
            detector: Silence detector (default RmsSilenceDetector)
            encoder: Output encoder (default PcmWavEncoder)
        """
        self.detector = detector or RmsSilenceDetector()
        self.encoder = encoder or PcmWavEncoder()
        self.buffer: Optional[SampleBuffer] = None
        self.source_name: Optional[str] = None
        self.region_set: RegionSet = EMPTY_REGION_SET

    # === Session lifecycle ===

    def open_buffer(self, buffer: SampleBuffer, source_name: Optional[str] = None):
        """Replace the current buffer; the region set starts empty."""
        self.buffer = buffer
        self.source_name = source_name
        self.region_set = EMPTY_REGION_SET
        logger.info(
            f"Opened {source_name or 'buffer'}: {buffer.duration:.2f}s, "
            f"{buffer.channels}ch @ {buffer.sample_rate}Hz"
        )

    def close(self):
        """Drop the buffer and all regions."""
        self.buffer = None
        self.source_name = None
        self.region_set = EMPTY_REGION_SET

    @property
    def has_buffer(self) -> bool:
        return self.buffer is not None

    @property
    def duration(self) -> float:
        return self._require_buffer().duration

    # === Region editing ===

    def mark_region(self, start: float, end: float) -> RegionSet:
        """
        Mark [start, end) for deletion.

        Endpoints may come in either order and are clamped to the buffer;
        an empty result is ignored.
        """
        region = self._normalize(start, end)
        if region is not None:
            self.region_set = self.region_set.merge(region)
            logger.debug(f"Marked [{region.start:.3f}, {region.end:.3f}) -> {len(self.region_set)} regions")
        return self.region_set

    def erase_region(self, start: float, end: float) -> RegionSet:
        """Restore [start, end) to kept audio."""
        region = self._normalize(start, end)
        if region is not None:
            self.region_set = self.region_set.subtract(region)
            logger.debug(f"Erased [{region.start:.3f}, {region.end:.3f}) -> {len(self.region_set)} regions")
        return self.region_set

    def apply_regions(self, regions: Iterable[Region]) -> RegionSet:
        """Merge proposals (e.g. from detection) into the region set."""
        for region in regions:
            self.mark_region(region.start, region.end)
        return self.region_set

    def set_region_set(self, region_set: RegionSet) -> RegionSet:
        """Replace the regions, e.g. restored from a sidecar; clamped to the buffer."""
        self.region_set = EMPTY_REGION_SET
        return self.apply_regions(region_set)

    def clear_regions(self) -> RegionSet:
        """Unmark everything."""
        self.region_set = EMPTY_REGION_SET
        return self.region_set

    # === Detection ===

    def detect_silence(
        self,
        threshold: Optional[float] = None,
        min_duration: Optional[float] = None,
        padding: Optional[float] = None
    ) -> List[Region]:
        """Run the detector on the current buffer; nothing is applied."""
        buffer = self._require_buffer()
        proposals = self.detector.detect(buffer, threshold=threshold, min_duration=min_duration, padding=padding)
        logger.info(f"Silence detection proposed {len(proposals)} regions")
        return proposals

    def auto_mark_silence(
        self,
        threshold: Optional[float] = None,
        min_duration: Optional[float] = None,
        padding: Optional[float] = None
    ) -> int:
        """
        Detect silence and merge every proposal.

        Returns:
            Number of proposed regions
        """
        proposals = self.detect_silence(threshold, min_duration, padding)
        self.apply_regions(proposals)
        return len(proposals)

    # === Render / export ===

    def kept_regions(self) -> List[Region]:
        """Complement of the marked regions, computed fresh."""
        return splicer.kept_regions(self.region_set, self._require_buffer().duration)

    def render(self) -> SampleBuffer:
        """New buffer without the marked regions."""
        return splicer.render(self._require_buffer(), self.kept_regions())

    def export_bytes(self) -> bytes:
        """Rendered audio encoded by the session encoder."""
        return self.encoder.encode(self.render())

    def get_summary(self) -> dict:
        """Durations and counts for the current session."""
        if self.buffer is None:
            return {}

        duration = self.buffer.duration
        deleted = self.region_set.total_duration(limit=duration)

        return {
            "source_name": self.source_name,
            "duration": duration,
            "deleted_duration": deleted,
            "output_duration": duration - deleted,
            "region_count": len(self.region_set),
            "channels": self.buffer.channels,
            "sample_rate": self.buffer.sample_rate,
        }

    # === Helpers ===

    def _require_buffer(self) -> SampleBuffer:
        if self.buffer is None:
            raise NoBufferLoadedError(EXPORT.Errors.NO_BUFFER)
        return self.buffer

    def _normalize(self, start: float, end: float) -> Optional[Region]:
        """Order, clamp to [0, duration]; None for an empty result."""
        duration = self._require_buffer().duration
        low, high = sorted((float(start), float(end)))
        region = Region(low, high).clamped(duration)
        if region.is_empty:
            logger.debug(f"Ignoring empty region [{start}, {end}) after clamping to {duration:.3f}s")
            return None
        return region
