"""
Interfaces for audio processing - defines the contracts for detection, encoding and loading.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from fullcut.domain.models import Region, SampleBuffer


class ISilenceDetector(ABC):
    """
    Base interface for silence detectors.
    Concrete implementation: RmsSilenceDetector.
    """

    @abstractmethod
    def detect(
        self,
        buffer: SampleBuffer,
        threshold: Optional[float] = None,
        min_duration: Optional[float] = None,
        padding: Optional[float] = None
    ) -> List[Region]:
        """
        Propose silent regions for removal.

        Args:
            buffer: Decoded audio
            threshold: RMS threshold override (0-1)
            min_duration: Minimum silence length override (s)
            padding: Padding override (s)

        Returns:
            Chronological list of regions, not merged with any RegionSet
        """
        pass


class IAudioEncoder(ABC):
    """Interface for container encoders."""

    @abstractmethod
    def encode(self, buffer: SampleBuffer) -> bytes:
        """
        Serialize a buffer.

        Args:
            buffer: Audio to encode

        Returns:
            Complete file contents
        """
        pass


class IAudioFileLoader(ABC):
    """Interface for loading audio files."""

    @abstractmethod
    def load(self, file_path: Path) -> Optional[SampleBuffer]:
        """
        Decode an audio file.

        Args:
            file_path: Path to the audio file

        Returns:
            SampleBuffer or None on failure
        """
        pass

    @abstractmethod
    def get_audio_info(self, file_path: Path) -> Optional[dict]:
        """
        Read file information without decoding the whole content.

        Args:
            file_path: Path to the file

        Returns:
            Dictionary with info (duration, sample_rate, channels, frames) or None
        """
        pass
