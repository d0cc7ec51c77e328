"""
RMS Silence Detector - Proposes silent regions for removal.
"""

import logging
import math
from typing import List, Optional

import numpy as np

from config import AUDIO
from fullcut.domain.interfaces.audio_processing import ISilenceDetector
from fullcut.domain.models import Region, SampleBuffer

logger = logging.getLogger(__name__)


class RmsSilenceDetector(ISilenceDetector):
    """
    Chunked RMS silence detector.

    Channel 0 is split into fixed-size chunks. A chunk whose RMS is below
    the threshold is silent; runs of silent chunks at least ``min_duration``
    long become regions, shrunk by ``padding`` on both sides so the attack
    and decay of neighbouring speech survive.

    Stereo material is analysed through channel 0 only.
    """

    def __init__(
        self,
        threshold: float = AUDIO.Detection.THRESHOLD,
        min_duration: float = AUDIO.Detection.MIN_DURATION,
        padding: float = AUDIO.Detection.PADDING,
        chunk_size: int = AUDIO.Detection.CHUNK_SIZE
    ):
        """
        Args:
            threshold: RMS level (0-1) below which a chunk counts as silent
            min_duration: Shorter silent stretches are natural gaps and kept (s)
            padding: Audio kept at each edge of a detected stretch (s)
            chunk_size: Samples per analysis chunk
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.threshold = threshold
        self.min_duration = min_duration
        self.padding = padding
        self.chunk_size = int(chunk_size)

    def detect(
        self,
        buffer: SampleBuffer,
        threshold: Optional[float] = None,
        min_duration: Optional[float] = None,
        padding: Optional[float] = None
    ) -> List[Region]:
        """
        Find silent stretches in a buffer.

        Args:
            buffer: Decoded audio (never modified)
            threshold: Override of the instance threshold
            min_duration: Override of the instance minimum duration
            padding: Override of the instance padding

        Returns:
            Chronological, padded regions; empty for an empty buffer
        """
        threshold = self.threshold if threshold is None else threshold
        min_duration = self.min_duration if min_duration is None else min_duration
        padding = self.padding if padding is None else padding

        if buffer.is_empty:
            logger.debug("Silence detection skipped: empty buffer")
            return []

        sample_rate = buffer.sample_rate
        frames = buffer.frames
        rms_values = self.chunk_rms(buffer.channel(AUDIO.Detection.ANALYSIS_CHANNEL))

        raw_regions: List[Region] = []
        is_silent = False
        silence_start = 0.0

        for index, rms in enumerate(rms_values):
            chunk_time = index * self.chunk_size / sample_rate

            if rms < threshold:
                if not is_silent:
                    is_silent = True
                    silence_start = chunk_time
            elif is_silent:
                if chunk_time - silence_start >= min_duration:
                    raw_regions.append(Region(silence_start, chunk_time))
                is_silent = False

        # Silence running into the end of the buffer
        if is_silent:
            silence_end = frames / sample_rate
            if silence_end - silence_start >= min_duration:
                raw_regions.append(Region(silence_start, silence_end))

        regions = [
            padded for padded in (Region(r.start + padding, r.end - padding) for r in raw_regions)
            if padded.end > padded.start
        ]

        logger.debug(
            f"Silence detection: {len(rms_values)} chunks, "
            f"{len(raw_regions)} silent stretches, {len(regions)} after padding "
            f"(threshold={threshold}, min_duration={min_duration}s, padding={padding}s)"
        )

        return regions

    def chunk_rms(self, samples: np.ndarray) -> np.ndarray:
        """
        RMS per chunk.

        Every chunk, including a shorter final one, is divided by the nominal
        chunk size, so the tail chunk reads quieter than its samples are.
        """
        samples = np.asarray(samples, dtype=np.float64)
        if samples.size == 0:
            return np.zeros(0, dtype=np.float64)

        chunk_count = math.ceil(samples.size / self.chunk_size)
        squares = np.zeros(chunk_count * self.chunk_size, dtype=np.float64)
        squares[:samples.size] = samples ** 2

        energy = squares.reshape(chunk_count, self.chunk_size).sum(axis=1)
        return np.sqrt(energy / self.chunk_size)

    def set_threshold(self, threshold: float):
        """
        Set the RMS threshold.

        Args:
            threshold: Clamped to 0-1
        """
        self.threshold = AUDIO.Detection.clamp_threshold(threshold)

    def set_min_duration(self, seconds: float):
        """Set the minimum silence duration (clamped to 0-60 s)."""
        self.min_duration = AUDIO.Detection.clamp_seconds(seconds)

    def set_padding(self, seconds: float):
        """Set the padding (clamped to 0-60 s)."""
        self.padding = AUDIO.Detection.clamp_seconds(seconds)

    def get_parameters(self) -> dict:
        """Current parameters, for logging and persistence."""
        return {
            "threshold": self.threshold,
            "min_duration": self.min_duration,
            "padding": self.padding,
            "chunk_size": self.chunk_size,
        }
