"""
Domain interfaces for Audio Full Cut.
"""

from .region_repository import IRegionRepository
from .audio_processing import (
    ISilenceDetector,
    IAudioEncoder,
    IAudioFileLoader,
)

__all__ = [
    "IRegionRepository",
    "ISilenceDetector",
    "IAudioEncoder",
    "IAudioFileLoader",
]
