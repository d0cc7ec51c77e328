"""
export_config.py - Export constants (WAV container, file naming, error messages)
"""

# =============================================================================
# WAV CONTAINER
# =============================================================================

class WavFormat:
    """Canonical PCM WAV layout (single fmt chunk, 44-byte header)."""

    HEADER_SIZE = 44

    # soundfile container and subtype of the encoder output (also checked on verify)
    FORMAT = 'WAV'
    SUBTYPE = 'PCM_16'


# =============================================================================
# EXPORT PROGRESS
# =============================================================================

class ExportProgress:
    """Progress milestones for export / detection workers (0-100%)."""

    PREPARE = 5
    RENDER = 20
    ENCODE = 60
    SAVE = 80
    COMPLETED = 100

    DETECT_START = 10


# =============================================================================
# ERROR MESSAGES
# =============================================================================

class ExportErrors:
    """Error messages for export operations."""

    NO_BUFFER = "No audio is loaded"
    ALLOCATION_FAILED = "Cannot allocate output buffer for {frames} frames x {channels} channels: {error}"
    FOLDER_NOT_WRITABLE = "Output folder is not writable: {folder}"
    WRITE_FAILED = "Failed to write {path}: {error}"
    VERIFY_FAILED = "Exported file failed verification: {reason}"
    SOURCE_OVERWRITE = "Refusing to overwrite the source file: {path}"


# =============================================================================
# FILE NAMING
# =============================================================================

class ExportFileNaming:
    """Output naming."""

    # Example: interview.wav -> interview_cut.wav
    FILENAME_PATTERN = "{stem}_cut.wav"

    DEFAULT_STEM = "untitled"
