"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add project root to the Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def qt_app():
    """Qt core application for QObject / QThread based tests."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def buffer_factory():
    """Factory for SampleBuffer objects in tests."""
    from fullcut.domain.models import SampleBuffer

    def create_buffer(
        segments=((1.0, 0.5),),
        sample_rate: int = 44100,
        channels: int = 1,
        frequency: float = 440.0
    ):
        """
        Build a buffer from (seconds, amplitude) segments.

        amplitude 0 gives digital silence, anything else a sine wave.
        """
        parts = []
        for seconds, amplitude in segments:
            n = int(round(seconds * sample_rate))
            t = np.arange(n) / sample_rate
            parts.append(amplitude * np.sin(2 * np.pi * frequency * t))
        mono = np.concatenate(parts) if parts else np.zeros(0)
        return SampleBuffer(np.tile(mono, (channels, 1)), sample_rate)

    return create_buffer


@pytest.fixture
def mock_wav_file(tmp_path):
    """Write a short mono WAV file: 1s tone, 1s silence, 1s tone."""
    import wave

    wav_path = tmp_path / "test_speech.wav"

    sample_rate = 44100
    t = np.arange(sample_rate) / sample_rate
    tone = 0.5 * np.sin(2 * np.pi * 440.0 * t)
    samples = np.concatenate([tone, np.zeros(sample_rate), tone])
    samples = (samples * 32767).astype(np.int16)

    with wave.open(str(wav_path), 'w') as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(samples.tobytes())

    return wav_path
