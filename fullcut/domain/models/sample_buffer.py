"""
SampleBuffer - Value object for decoded, multi-channel audio.
"""

from typing import Sequence

import numpy as np

from fullcut.domain.exceptions import InvalidBufferError


class SampleBuffer:
    """
    Immutable multi-channel float audio.

    Samples are stored channel-major, shape ``(channels, frames)``, as a
    read-only float32 array. Values are kept exactly as decoded; clamping to
    [-1, 1] happens only on encode.
    """

    __slots__ = ("_samples", "_sample_rate")

    def __init__(self, samples: np.ndarray, sample_rate: int):
        """
        Args:
            samples: Array of shape (channels, frames), or (frames,) for mono
            sample_rate: Sample rate in Hz (positive integer)
        """
        if isinstance(sample_rate, bool) or int(sample_rate) != sample_rate or sample_rate <= 0:
            raise InvalidBufferError(f"Sample rate must be a positive integer, got {sample_rate!r}")

        data = np.array(samples, dtype=np.float32, copy=True)
        if data.ndim == 1:
            data = data.reshape(1, -1)
        if data.ndim != 2:
            raise InvalidBufferError(f"Expected 1D or 2D samples, got {data.ndim}D")
        if data.shape[0] < 1:
            raise InvalidBufferError("Buffer needs at least one channel")

        data.setflags(write=False)
        self._samples = data
        self._sample_rate = int(sample_rate)

    # === Factories ===

    @classmethod
    def from_interleaved(cls, frames: np.ndarray, sample_rate: int) -> "SampleBuffer":
        """
        Build a buffer from frame-major data, shape (frames, channels) or (frames,).

        This is the layout returned by soundfile and most decoders.
        """
        data = np.asarray(frames)
        if data.ndim == 1:
            return cls(data, sample_rate)
        if data.ndim != 2:
            raise InvalidBufferError(f"Expected 1D or 2D frames, got {data.ndim}D")
        return cls(data.T, sample_rate)

    @classmethod
    def from_channels(cls, channels: Sequence[Sequence[float]], sample_rate: int) -> "SampleBuffer":
        """Build a buffer from one sequence per channel; lengths must match."""
        if len(channels) == 0:
            raise InvalidBufferError("Buffer needs at least one channel")
        lengths = {len(ch) for ch in channels}
        if len(lengths) != 1:
            raise InvalidBufferError(f"All channels must share one length, got {sorted(lengths)}")
        return cls(np.vstack([np.asarray(ch, dtype=np.float32) for ch in channels]), sample_rate)

    @classmethod
    def silence(cls, frames: int, sample_rate: int, channels: int = 1) -> "SampleBuffer":
        """Zero-filled buffer."""
        return cls(np.zeros((channels, frames), dtype=np.float32), sample_rate)

    # === Properties ===

    @property
    def samples(self) -> np.ndarray:
        """Read-only (channels, frames) view."""
        return self._samples

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def channels(self) -> int:
        return self._samples.shape[0]

    @property
    def frames(self) -> int:
        return self._samples.shape[1]

    @property
    def duration(self) -> float:
        """Length in seconds."""
        return self.frames / self._sample_rate

    @property
    def is_empty(self) -> bool:
        return self.frames == 0

    def channel(self, index: int) -> np.ndarray:
        """Read-only samples of one channel."""
        return self._samples[index]

    def to_interleaved(self) -> np.ndarray:
        """Frame-major copy, shape (frames, channels)."""
        return np.ascontiguousarray(self._samples.T)

    def __len__(self) -> int:
        return self.frames

    def __eq__(self, other) -> bool:
        if not isinstance(other, SampleBuffer):
            return NotImplemented
        return (
            self._sample_rate == other._sample_rate
            and self._samples.shape == other._samples.shape
            and bool(np.array_equal(self._samples, other._samples))
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SampleBuffer(channels={self.channels}, frames={self.frames}, "
            f"sample_rate={self._sample_rate}, duration={self.duration:.3f}s)"
        )
