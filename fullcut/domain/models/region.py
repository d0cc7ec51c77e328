"""
Region, RegionSet - Time intervals marked for deletion.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True, order=True)
class Region:
    """Half-open interval [start, end) in seconds."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """True for degenerate or inverted intervals."""
        return self.end <= self.start

    def overlaps(self, other: "Region") -> bool:
        """True when the two intervals share some time."""
        return not (other.end <= self.start or other.start >= self.end)

    def clamped(self, duration: float) -> "Region":
        """Copy limited to [0, duration]; may come out empty."""
        return Region(max(0.0, min(self.start, duration)), max(0.0, min(self.end, duration)))

    def to_dict(self) -> dict:
        return {"start": float(self.start), "end": float(self.end)}

    @classmethod
    def from_dict(cls, data: dict) -> "Region":
        return cls(float(data["start"]), float(data["end"]))


def merge_regions(regions: Iterable[Region], new_region: Region) -> List[Region]:
    """
    Union of a sorted, non-overlapping region list with one more region.

    Degenerate candidates (end <= start) are ignored. Touching regions
    coalesce, so the result satisfies ``result[i].end < result[i + 1].start``.
    """
    current = list(regions)
    if new_region.is_empty:
        return current

    ordered = sorted(current + [new_region], key=lambda r: r.start)

    merged: List[Region] = [ordered[0]]
    for region in ordered[1:]:
        last = merged[-1]
        if region.start <= last.end:
            # Overlap or adjacency: extend the running region
            merged[-1] = Region(last.start, max(last.end, region.end))
        else:
            merged.append(region)

    return merged


def subtract_region(regions: Iterable[Region], subtract: Region) -> List[Region]:
    """
    Remove an interval from a region list, splitting or shortening regions.

    Order is preserved and no re-merge is needed: removal cannot create
    overlaps.
    """
    result: List[Region] = []

    for region in regions:
        if subtract.end <= region.start or subtract.start >= region.end:
            result.append(region)
            continue

        # Left remainder
        if region.start < subtract.start:
            result.append(Region(region.start, subtract.start))

        # Right remainder
        if region.end > subtract.end:
            result.append(Region(subtract.end, region.end))

    return result


class RegionSet:
    """
    Canonical set of regions marked for deletion.

    Immutable: ``merge`` and ``subtract`` return a new set. Invariants:
    sorted by start, and every region ends strictly before the next starts.
    """

    __slots__ = ("_regions",)

    def __init__(self, regions: Optional[Iterable[Region]] = None):
        """
        Args:
            regions: Any regions; they are folded in through merge, so
                unsorted or overlapping input is normalized
        """
        normalized: List[Region] = []
        for region in regions or ():
            normalized = merge_regions(normalized, region)
        self._regions: Tuple[Region, ...] = tuple(normalized)

    @classmethod
    def _trusted(cls, regions: List[Region]) -> "RegionSet":
        """Wrap an already canonical list without re-normalizing."""
        instance = cls.__new__(cls)
        instance._regions = tuple(regions)
        return instance

    def merge(self, region: Region) -> "RegionSet":
        """Return the union of this set and ``region``."""
        if region.is_empty:
            return self
        return RegionSet._trusted(merge_regions(self._regions, region))

    def merge_all(self, regions: Iterable[Region]) -> "RegionSet":
        """Merge several regions, in any order."""
        result = self
        for region in regions:
            result = result.merge(region)
        return result

    def subtract(self, region: Region) -> "RegionSet":
        """Return this set with ``region`` restored to kept audio."""
        if region.is_empty:
            return self
        return RegionSet._trusted(subtract_region(self._regions, region))

    @property
    def regions(self) -> Tuple[Region, ...]:
        return self._regions

    def total_duration(self, limit: Optional[float] = None) -> float:
        """
        Covered time in seconds.

        Args:
            limit: If given, coverage is clipped to [0, limit]
        """
        total = 0.0
        for region in self._regions:
            if limit is not None:
                region = region.clamped(limit)
            if not region.is_empty:
                total += region.duration
        return total

    def contains(self, time: float) -> bool:
        """True when ``time`` falls inside a marked region."""
        return any(r.start <= time < r.end for r in self._regions)

    def is_canonical(self) -> bool:
        """Check both invariants; always True for sets built by this class."""
        for region in self._regions:
            if region.is_empty:
                return False
        for left, right in zip(self._regions, self._regions[1:]):
            if not left.end < right.start:
                return False
        return True

    def to_list(self) -> List[dict]:
        return [r.to_dict() for r in self._regions]

    @classmethod
    def from_list(cls, data: Iterable[dict]) -> "RegionSet":
        return cls(Region.from_dict(item) for item in data)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __bool__(self) -> bool:
        return bool(self._regions)

    def __getitem__(self, index: int) -> Region:
        return self._regions[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, RegionSet):
            return NotImplemented
        return self._regions == other._regions

    def __hash__(self) -> int:
        return hash(self._regions)

    def __repr__(self) -> str:
        spans = ", ".join(f"[{r.start:.3f}, {r.end:.3f})" for r in self._regions)
        return f"RegionSet({spans})"


EMPTY_REGION_SET = RegionSet()
