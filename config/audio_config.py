"""
audio_config.py - Audio constants (silence detection, PCM conversion, loading)
"""

# =============================================================================
# SILENCE DETECTION
# =============================================================================

class Detection:
    """Default parameters for RMS silence detection."""

    # RMS threshold on a 0-1 scale (~ -36.5 dBFS)
    THRESHOLD = 0.015

    # Shortest silent stretch that is proposed for removal (s)
    MIN_DURATION = 0.2

    # Kept on both sides of a silent stretch to protect attack/decay (s)
    PADDING = 0.05

    # Samples per analysis chunk
    CHUNK_SIZE = 4096

    # Only channel 0 is analysed
    ANALYSIS_CHANNEL = 0

    # Setter limits
    MIN_THRESHOLD = 0.0
    MAX_THRESHOLD = 1.0
    MIN_SECONDS = 0.0
    MAX_SECONDS = 60.0

    @classmethod
    def clamp_threshold(cls, threshold: float) -> float:
        """Clamp a threshold into the accepted 0-1 range."""
        return max(cls.MIN_THRESHOLD, min(cls.MAX_THRESHOLD, float(threshold)))

    @classmethod
    def clamp_seconds(cls, seconds: float) -> float:
        """Clamp a duration parameter into the accepted range."""
        return max(cls.MIN_SECONDS, min(cls.MAX_SECONDS, float(seconds)))


# =============================================================================
# PCM PARAMETERS
# =============================================================================

class Audio:
    """Sample format parameters for decoding and 16-bit export."""

    # Float sample range
    SAMPLE_MIN = -1.0
    SAMPLE_MAX = 1.0

    # Asymmetric scale: full negative range, no positive overflow at +1.0
    NEGATIVE_SCALE = 32768
    POSITIVE_SCALE = 32767

    # In-memory dtype of decoded samples
    BUFFER_DTYPE = 'float32'


# =============================================================================
# LOADING
# =============================================================================

class Loading:
    """Decoder settings."""

    # soundfile can read these natively
    SOUNDFILE_FORMATS = ['WAV', 'FLAC', 'AIFF', 'OGG']

    # librosa (audioread backend) covers the rest
    LIBROSA_FORMATS = ['MP3', 'M4A']

    # Error text truncation when collecting decoder failures
    ERROR_SNIPPET_LENGTH = 100
