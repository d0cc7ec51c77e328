"""
AudioFileLoader - Decodes audio files into SampleBuffers using the available libraries.
"""
import logging
from pathlib import Path
from typing import Optional

import numpy as np
import soundfile as sf

from config import AUDIO
from fullcut.domain.exceptions import InvalidBufferError
from fullcut.domain.interfaces.audio_processing import IAudioFileLoader
from fullcut.domain.models import SampleBuffer

logger = logging.getLogger(__name__)

try:
    import librosa
    LIBROSA_AVAILABLE = True
except ImportError:
    LIBROSA_AVAILABLE = False
    logger.info("librosa not available - compressed formats limited to soundfile support")


class AudioFileLoader(IAudioFileLoader):
    """Decodes audio with soundfile, falling back to librosa."""

    def load(self, file_path: Path) -> Optional[SampleBuffer]:
        """
        Decode an audio file.

        Args:
            file_path: Path to the audio file

        Returns:
            SampleBuffer or None on failure
        """
        filepath = Path(file_path)
        errors = []
        snippet = AUDIO.Loading.ERROR_SNIPPET_LENGTH

        # soundfile first: (frames, channels)
        try:
            waveform, sr = sf.read(str(filepath), dtype=AUDIO.Audio.BUFFER_DTYPE, always_2d=True)
            buffer = SampleBuffer.from_interleaved(waveform, sr)
            logger.debug(f"Loaded {filepath.name} with soundfile: {buffer}")
            return buffer
        except (RuntimeError, OSError, InvalidBufferError) as e:
            errors.append(f"soundfile: {str(e)[:snippet]}")
            logger.debug(f"Soundfile failed: {e}")

        # librosa: (channels, frames) or (frames,) for mono
        if LIBROSA_AVAILABLE:
            try:
                waveform, sr = librosa.load(str(filepath), sr=None, mono=False)
                buffer = SampleBuffer(np.asarray(waveform, dtype=np.float32), int(sr))
                logger.warning(f"Loaded {filepath.name} with librosa fallback: {buffer}")
                return buffer
            except Exception as e:
                errors.append(f"librosa: {str(e)[:snippet]}")
                logger.debug(f"Librosa failed: {e}")

        all_errors = "; ".join(errors)
        logger.error(f"Failed to load {filepath.name}. Tried: {all_errors}")
        return None

    def get_audio_info(self, file_path: Path) -> Optional[dict]:
        """
        Read file information without decoding the whole content.

        Args:
            file_path: Path to the file

        Returns:
            Dict with info (duration, sample_rate, channels, frames) or None
        """
        filepath = Path(file_path)
        try:
            info = sf.info(str(filepath))
            return {
                "duration": info.duration,
                "sample_rate": info.samplerate,
                "channels": info.channels,
                "frames": info.frames,
                "format": info.format,
                "subtype": info.subtype,
            }
        except (RuntimeError, OSError) as e:
            logger.debug(f"Failed to get info: {e}")

        return None

    @staticmethod
    def get_supported_formats() -> list:
        """Return the list of decodable formats."""
        formats = list(AUDIO.Loading.SOUNDFILE_FORMATS)

        if LIBROSA_AVAILABLE:
            formats.extend(AUDIO.Loading.LIBROSA_FORMATS)

        return sorted(set(formats))
