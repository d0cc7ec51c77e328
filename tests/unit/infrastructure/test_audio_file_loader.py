"""
Unit tests for AudioFileLoader.
"""

from unittest.mock import patch

import numpy as np
import pytest
import soundfile as sf

from fullcut.infrastructure.audio import AudioFileLoader

LOADER_MODULE = 'fullcut.infrastructure.audio.audio_file_loader'


@pytest.fixture
def loader():
    return AudioFileLoader()


@pytest.fixture
def stereo_flac(tmp_path):
    """Half a second of stereo FLAC with distinct channels."""
    path = tmp_path / "stereo.flac"
    t = np.arange(24000) / 48000
    left = 0.5 * np.sin(2 * np.pi * 220 * t)
    right = 0.25 * np.sin(2 * np.pi * 330 * t)
    sf.write(str(path), np.column_stack([left, right]), 48000, subtype='PCM_16')
    return path


@pytest.mark.unit
class TestAudioFileLoader:
    """Test suite for AudioFileLoader."""

    def test_load_mono_wav(self, loader, mock_wav_file):
        buffer = loader.load(mock_wav_file)

        assert buffer is not None
        assert buffer.channels == 1
        assert buffer.sample_rate == 44100
        assert buffer.frames == 3 * 44100
        assert buffer.samples.dtype == np.float32

    def test_load_stereo_keeps_channel_layout(self, loader, stereo_flac):
        buffer = loader.load(stereo_flac)

        assert buffer.channels == 2
        assert buffer.frames == 24000
        assert np.max(np.abs(buffer.channel(0))) == pytest.approx(0.5, abs=1e-3)
        assert np.max(np.abs(buffer.channel(1))) == pytest.approx(0.25, abs=1e-3)

    def test_missing_file_returns_none(self, loader, tmp_path):
        with patch(f'{LOADER_MODULE}.LIBROSA_AVAILABLE', False):
            assert loader.load(tmp_path / "missing.wav") is None

    def test_undecodable_file_returns_none(self, loader, tmp_path):
        garbage = tmp_path / "garbage.wav"
        garbage.write_bytes(b"not audio at all" * 64)

        with patch(f'{LOADER_MODULE}.LIBROSA_AVAILABLE', False):
            assert loader.load(garbage) is None

    def test_get_audio_info(self, loader, stereo_flac):
        info = loader.get_audio_info(stereo_flac)

        assert info["sample_rate"] == 48000
        assert info["channels"] == 2
        assert info["frames"] == 24000
        assert info["duration"] == pytest.approx(0.5)
        assert info["format"] == 'FLAC'

    def test_get_audio_info_missing_file(self, loader, tmp_path):
        assert loader.get_audio_info(tmp_path / "missing.wav") is None

    def test_supported_formats(self):
        formats = AudioFileLoader.get_supported_formats()
        assert 'WAV' in formats
        assert 'FLAC' in formats
        assert formats == sorted(formats)
