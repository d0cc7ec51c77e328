"""
PcmWavEncoder - Canonical 16-bit PCM WAV serialization.
"""

import io
import logging

import numpy as np
import soundfile as sf

from config import AUDIO, EXPORT
from fullcut.domain.interfaces.audio_processing import IAudioEncoder
from fullcut.domain.models import SampleBuffer

logger = logging.getLogger(__name__)


class PcmWavEncoder(IAudioEncoder):
    """
    Encodes a SampleBuffer as a single-fmt-chunk PCM WAV.

    Layout: 44-byte header, then interleaved little-endian int16 frames.
    Samples are converted to int16 here, so soundfile writes them unscaled.
    """

    def encode(self, buffer: SampleBuffer) -> bytes:
        """
        Serialize a buffer.

        Args:
            buffer: Audio to encode

        Returns:
            WAV file contents
        """
        # (channels, frames) -> (frames, channels) as soundfile expects
        frames = np.ascontiguousarray(self.to_pcm16(buffer.samples).T)

        out = io.BytesIO()
        sf.write(out, frames, buffer.sample_rate, format=EXPORT.Wav.FORMAT, subtype=EXPORT.Wav.SUBTYPE)
        data = out.getvalue()

        logger.debug(
            f"Encoded WAV: {buffer.frames} frames, {buffer.channels} channels, "
            f"{buffer.sample_rate}Hz, {len(data)} bytes"
        )

        return data

    @staticmethod
    def to_pcm16(samples: np.ndarray) -> np.ndarray:
        """
        Float samples to int16.

        Clamp to [-1, 1], scale negatives by 32768 and the rest by 32767,
        truncate toward zero.
        """
        values = np.nan_to_num(np.asarray(samples, dtype=np.float64), nan=0.0)
        clipped = np.clip(values, AUDIO.Audio.SAMPLE_MIN, AUDIO.Audio.SAMPLE_MAX)
        scaled = np.where(
            clipped < 0,
            clipped * AUDIO.Audio.NEGATIVE_SCALE,
            clipped * AUDIO.Audio.POSITIVE_SCALE,
        )
        return np.trunc(scaled).astype(np.int16)
