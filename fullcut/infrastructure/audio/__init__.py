"""
Audio infrastructure - loading, silence detection, splicing and WAV encoding.
"""

from .audio_file_loader import AudioFileLoader
from .silence_detector import RmsSilenceDetector
from .splicer import kept_regions, render, splice
from .wav_encoder import PcmWavEncoder

__all__ = [
    "AudioFileLoader",
    "RmsSilenceDetector",
    "kept_regions",
    "render",
    "splice",
    "PcmWavEncoder",
]
