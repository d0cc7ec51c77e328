"""
config - Central configuration for Audio Full Cut

Usage:
    from config import AUDIO, EXPORT, APP

    detector = RmsSilenceDetector(threshold=AUDIO.Detection.THRESHOLD)
    header_size = EXPORT.Wav.HEADER_SIZE
"""

from .audio_config import (
    Detection,
    Audio,
    Loading,
)

from .export_config import (
    WavFormat,
    ExportProgress,
    ExportErrors,
    ExportFileNaming,
)

from .app_config import (
    AppInfo,
    RegionStorage,
    LoggingConfig,
    Paths,
)

# Namespace objects for categorical access
class AUDIO:
    """Audio configuration - detection, PCM conversion, loading."""
    Detection = Detection
    Audio = Audio
    Loading = Loading


class EXPORT:
    """Export configuration - WAV layout, progress, naming, errors."""
    Wav = WavFormat
    Progress = ExportProgress
    Errors = ExportErrors
    FileNaming = ExportFileNaming


class APP:
    """Application configuration - metadata, storage, logging."""
    Info = AppInfo
    Regions = RegionStorage
    Logging = LoggingConfig
    Paths = Paths


# Platform-specific user data directory
import logging
from pathlib import Path
from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

# Resolved only; created on first write by the region repository
DATA_DIR = Path(user_data_dir(
    appname=AppInfo.APP_DIR_NAME,
    appauthor=AppInfo.APP_AUTHOR,
))
REGIONS_DIR = Paths.get_regions_dir(DATA_DIR)

logger.debug(f"Regions directory: {REGIONS_DIR}")

__version__ = AppInfo.VERSION
__all__ = [
    'AUDIO',
    'EXPORT',
    'APP',
    'DATA_DIR',
    'REGIONS_DIR',
    # Individual classes (for direct import)
    'Detection',
    'Audio',
    'Loading',
    'WavFormat',
    'ExportProgress',
    'ExportErrors',
    'ExportFileNaming',
    'AppInfo',
    'RegionStorage',
    'LoggingConfig',
    'Paths',
]
