"""
Unit tests for EditService.
"""

import io
from unittest.mock import Mock

import numpy as np
import pytest
import soundfile as sf

from fullcut.application.services import EditService
from fullcut.domain.exceptions import NoBufferLoadedError
from fullcut.domain.interfaces import ISilenceDetector
from fullcut.domain.models import Region, RegionSet, SampleBuffer


@pytest.fixture
def ten_second_buffer():
    """Mono, 8 Hz, 10 s ramp."""
    return SampleBuffer(np.arange(80) / 100.0, 8)


@pytest.fixture
def mock_detector():
    detector = Mock(spec=ISilenceDetector)
    detector.detect.return_value = [Region(2.0, 4.0), Region(7.0, 9.0)]
    return detector


@pytest.fixture
def service(ten_second_buffer, mock_detector):
    service = EditService(detector=mock_detector)
    service.open_buffer(ten_second_buffer, source_name="ramp.wav")
    return service


@pytest.mark.unit
class TestEditService:
    """Test suite for EditService."""

    def test_initial_state(self):
        service = EditService()
        assert not service.has_buffer
        assert len(service.region_set) == 0
        assert service.get_summary() == {}

    def test_operations_require_buffer(self):
        service = EditService()
        with pytest.raises(NoBufferLoadedError):
            service.mark_region(0, 1)
        with pytest.raises(NoBufferLoadedError):
            service.render()
        with pytest.raises(NoBufferLoadedError):
            service.detect_silence()

    def test_mark_and_erase(self, service):
        service.mark_region(1.0, 5.0)
        service.erase_region(2.0, 3.0)
        assert list(service.region_set) == [Region(1.0, 2.0), Region(3.0, 5.0)]

    def test_mark_reversed_endpoints(self, service):
        service.mark_region(5.0, 1.0)
        assert list(service.region_set) == [Region(1.0, 5.0)]

    def test_mark_clamped_to_buffer(self, service):
        service.mark_region(-3.0, 2.0)
        service.mark_region(9.0, 30.0)
        assert list(service.region_set) == [Region(0.0, 2.0), Region(9.0, 10.0)]

    def test_mark_outside_buffer_ignored(self, service):
        service.mark_region(11.0, 12.0)
        service.mark_region(3.0, 3.0)
        assert len(service.region_set) == 0

    def test_open_resets_regions(self, service, ten_second_buffer):
        service.mark_region(1.0, 2.0)
        service.open_buffer(ten_second_buffer, source_name="other.wav")
        assert len(service.region_set) == 0
        assert service.source_name == "other.wav"

    def test_detect_does_not_apply(self, service, mock_detector):
        proposals = service.detect_silence(threshold=0.1)

        assert proposals == [Region(2.0, 4.0), Region(7.0, 9.0)]
        assert len(service.region_set) == 0
        mock_detector.detect.assert_called_once_with(
            service.buffer, threshold=0.1, min_duration=None, padding=None
        )

    def test_auto_mark_silence(self, service):
        count = service.auto_mark_silence()

        assert count == 2
        assert list(service.region_set) == [Region(2.0, 4.0), Region(7.0, 9.0)]

    def test_set_region_set_clamps(self, service):
        service.set_region_set(RegionSet([Region(8.0, 15.0)]))
        assert list(service.region_set) == [Region(8.0, 10.0)]

    def test_render_and_summary(self, service):
        service.auto_mark_silence()

        rendered = service.render()
        summary = service.get_summary()

        assert rendered.frames == 48
        assert summary["duration"] == pytest.approx(10.0)
        assert summary["deleted_duration"] == pytest.approx(4.0)
        assert summary["output_duration"] == pytest.approx(6.0)
        assert summary["region_count"] == 2
        assert summary["source_name"] == "ramp.wav"

    def test_kept_regions(self, service):
        service.auto_mark_silence()
        assert service.kept_regions() == [Region(0.0, 2.0), Region(4.0, 7.0), Region(9.0, 10.0)]

    def test_export_bytes(self, service):
        service.mark_region(0.0, 5.0)

        data = service.export_bytes()
        info = sf.info(io.BytesIO(data))

        assert info.frames == 40
        assert info.samplerate == 8

    def test_close(self, service):
        service.mark_region(0.0, 1.0)
        service.close()
        assert not service.has_buffer
        assert len(service.region_set) == 0
