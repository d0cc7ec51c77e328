"""
Splicer - Complement of the deleted regions and sample-accurate render.
"""

import logging
import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from config import EXPORT
from fullcut.domain.exceptions import RenderAllocationError
from fullcut.domain.models import Region, RegionSet, SampleBuffer

logger = logging.getLogger(__name__)


def kept_regions(region_set: Iterable[Region], total_duration: float) -> List[Region]:
    """
    Complement of a sorted, non-overlapping region set within [0, total_duration).

    Deleted regions reaching past the end are clipped, so kept time plus
    clipped deleted time always equals ``total_duration``.

    Args:
        region_set: Regions marked for deletion
        total_duration: Buffer duration in seconds

    Returns:
        Sorted, disjoint kept regions
    """
    kept: List[Region] = []
    cursor = 0.0

    for region in sorted(region_set, key=lambda r: r.start):
        if cursor >= total_duration:
            break
        gap_end = min(region.start, total_duration)
        if cursor < gap_end:
            kept.append(Region(cursor, gap_end))
        cursor = max(cursor, region.end)

    if cursor < total_duration:
        kept.append(Region(cursor, total_duration))

    return kept


def sample_span(region: Region, sample_rate: int) -> Tuple[int, int]:
    """Convert a region to (start_sample, end_sample) with floor rounding."""
    return math.floor(region.start * sample_rate), math.floor(region.end * sample_rate)


def allocate_output(channels: int, frames: int) -> np.ndarray:
    """Zeroed (channels, frames) float32 output buffer."""
    try:
        return np.zeros((channels, frames), dtype=np.float32)
    except (MemoryError, ValueError) as e:
        raise RenderAllocationError(
            EXPORT.Errors.ALLOCATION_FAILED.format(frames=frames, channels=channels, error=e)
        ) from e


def copy_spans(source: np.ndarray, spans: Sequence[Tuple[int, int]], output: np.ndarray) -> int:
    """
    Copy sample spans of ``source`` back to back into ``output``.

    A copy that would run past the end of ``output`` is truncated to fit.

    Returns:
        Output frames covered, at most the output length
    """
    capacity = output.shape[1]
    offset = 0

    for start, end in spans:
        length = end - start
        if length <= 0:
            continue

        # Empty or short when the span reaches past the source; the gap stays zero
        chunk = source[:, start:end]
        fit = max(0, min(chunk.shape[1], capacity - offset))
        if fit < chunk.shape[1]:
            logger.warning(
                f"Render overflow at frame {offset}: truncating {chunk.shape[1] - fit} samples"
            )
        if fit > 0:
            output[:, offset:offset + fit] = chunk[:, :fit]
        offset += length

    return min(offset, capacity)


def render(buffer: SampleBuffer, keep: Iterable[Region]) -> SampleBuffer:
    """
    Concatenate the kept sample ranges into a new buffer.

    All channels are cut at the same sample boundaries. The output length is
    the sum of ``end_sample - start_sample`` over the kept regions; spans
    reaching past the source leave zeros.

    Args:
        buffer: Source audio (never modified)
        keep: Kept regions, sorted

    Returns:
        New SampleBuffer with the source sample rate and channel count

    Raises:
        RenderAllocationError: Output buffer could not be allocated
    """
    sample_rate = buffer.sample_rate
    spans = [sample_span(region, sample_rate) for region in keep]
    total_frames = sum(max(0, end - start) for start, end in spans)

    output = allocate_output(buffer.channels, total_frames)
    copy_spans(buffer.samples, spans, output)

    logger.debug(
        f"Rendered {len(spans)} kept regions: {buffer.frames} -> {total_frames} frames "
        f"({buffer.channels} channels @ {sample_rate}Hz)"
    )

    return SampleBuffer(output, sample_rate)


def splice(buffer: SampleBuffer, region_set: RegionSet) -> SampleBuffer:
    """Render ``buffer`` without the regions in ``region_set``."""
    return render(buffer, kept_regions(region_set, buffer.duration))
