"""
app_config.py - General application constants (logging, region storage, paths)
"""

from pathlib import Path

# =============================================================================
# APPLICATION METADATA
# =============================================================================

class AppInfo:
    """Application information."""

    NAME = "Audio Full Cut"
    VERSION = "1.0"
    FULL_NAME = "Audio Full Cut - Silence Removal Editor"

    # platformdirs identifiers
    APP_DIR_NAME = "AudioFullCut"
    APP_AUTHOR = "FullCut"

    DESCRIPTION = """Non-destructive silence removal:
• RMS silence detection
• Region marking and erasing
• Sample-accurate splicing
• 16-bit PCM WAV export"""


# =============================================================================
# REGION STORAGE
# =============================================================================

class RegionStorage:
    """Configuration of region sidecar files."""

    # Subdirectory under the user data dir
    DIR_NAME = "regions"

    # <md5>.regions.json
    FILE_SUFFIX = ".regions.json"
    BACKUP_SUFFIX = ".backup"

    # Bumped when the sidecar layout changes
    FORMAT_VERSION = "1.0"

    # Read chunk for hashing source files
    HASH_CHUNK_SIZE = 8192


# =============================================================================
# LOGGING
# =============================================================================

class LoggingConfig:
    """Logging configuration (applied by main.py)."""

    DEFAULT_LEVEL = "INFO"
    VERBOSE_LEVEL = "DEBUG"

    FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
    VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# =============================================================================
# PATHS
# =============================================================================

class Paths:
    """Paths used by the application."""

    @staticmethod
    def get_regions_dir(base_dir: Path) -> Path:
        """Return the region sidecar directory under a base data dir."""
        return Path(base_dir) / RegionStorage.DIR_NAME

    @staticmethod
    def get_region_file(regions_dir: Path, source_hash: str) -> Path:
        """Return the sidecar path for a source file hash."""
        return Path(regions_dir) / f"{source_hash}{RegionStorage.FILE_SUFFIX}"
