"""
Unit tests for Region / RegionSet.
"""

import random

import pytest

from fullcut.domain.models import Region, RegionSet, merge_regions, subtract_region


def random_regions(rng, count, span=100.0):
    regions = []
    for _ in range(count):
        start = rng.uniform(0, span)
        regions.append(Region(start, start + rng.uniform(0.01, span / 10)))
    return regions


def assert_canonical(region_set):
    for region in region_set:
        assert region.start < region.end
    for left, right in zip(region_set, list(region_set)[1:]):
        assert left.end < right.start


@pytest.mark.unit
class TestRegion:
    """Tests for the Region value object."""

    def test_duration_and_empty(self):
        assert Region(1.0, 3.5).duration == 2.5
        assert not Region(1.0, 3.5).is_empty
        assert Region(2.0, 2.0).is_empty
        assert Region(3.0, 2.0).is_empty

    def test_clamped(self):
        assert Region(-1.0, 5.0).clamped(4.0) == Region(0.0, 4.0)
        assert Region(6.0, 8.0).clamped(4.0).is_empty

    def test_overlaps_is_half_open(self):
        assert Region(0, 2).overlaps(Region(1, 3))
        assert not Region(0, 2).overlaps(Region(2, 3))
        assert not Region(2, 3).overlaps(Region(0, 2))

    def test_dict_round_trip(self):
        region = Region(0.25, 1.75)
        assert Region.from_dict(region.to_dict()) == region


@pytest.mark.unit
class TestMerge:
    """Tests for merge."""

    def test_merge_into_empty(self):
        result = RegionSet().merge(Region(1, 2))
        assert list(result) == [Region(1, 2)]

    def test_merge_keeps_disjoint_sorted(self):
        result = RegionSet().merge(Region(5, 6)).merge(Region(1, 2))
        assert list(result) == [Region(1, 2), Region(5, 6)]

    def test_merge_overlapping(self):
        result = RegionSet([Region(1, 3)]).merge(Region(2, 5))
        assert list(result) == [Region(1, 5)]

    def test_merge_touching_coalesces(self):
        result = RegionSet([Region(0, 1)]).merge(Region(1, 2))
        assert list(result) == [Region(0, 2)]

    def test_merge_bridges_several(self):
        base = RegionSet([Region(0, 1), Region(2, 3), Region(4, 5), Region(8, 9)])
        result = base.merge(Region(0.5, 4.5))
        assert list(result) == [Region(0, 5), Region(8, 9)]

    def test_merge_contained_region(self):
        result = RegionSet([Region(0, 10)]).merge(Region(2, 3))
        assert list(result) == [Region(0, 10)]

    def test_merge_degenerate_is_noop(self):
        base = RegionSet([Region(1, 2)])
        assert base.merge(Region(3, 3)) == base
        assert base.merge(Region(4, 3)) == base

    def test_merge_idempotent(self):
        base = RegionSet([Region(0, 1), Region(3, 4)])
        once = base.merge(Region(0.5, 3.2))
        assert once.merge(Region(0.5, 3.2)) == once

    def test_merge_returns_new_set(self):
        base = RegionSet([Region(0, 1)])
        base.merge(Region(2, 3))
        assert list(base) == [Region(0, 1)]

    def test_merge_order_independent(self):
        rng = random.Random(7)
        regions = random_regions(rng, 40)
        expected = RegionSet().merge_all(regions)

        for _ in range(5):
            shuffled = regions[:]
            rng.shuffle(shuffled)
            assert RegionSet().merge_all(shuffled) == expected

    def test_invariant_after_random_merges(self):
        rng = random.Random(11)
        region_set = RegionSet()
        for region in random_regions(rng, 200):
            region_set = region_set.merge(region)
            assert_canonical(region_set)
        assert region_set.is_canonical()

    def test_merge_regions_function_on_plain_list(self):
        merged = merge_regions([Region(0, 1)], Region(0.5, 2))
        assert merged == [Region(0, 2)]

    def test_constructor_normalizes_input(self):
        region_set = RegionSet([Region(4, 5), Region(0, 2), Region(1, 3), Region(6, 6)])
        assert list(region_set) == [Region(0, 3), Region(4, 5)]


@pytest.mark.unit
class TestSubtract:
    """Tests for subtract."""

    def test_split_in_two(self):
        result = RegionSet([Region(0, 10)]).subtract(Region(3, 4))
        assert list(result) == [Region(0, 3), Region(4, 10)]

    def test_trim_left_and_right(self):
        base = RegionSet([Region(0, 4), Region(6, 10)])
        result = base.subtract(Region(3, 7))
        assert list(result) == [Region(0, 3), Region(7, 10)]

    def test_fully_contained_vanishes(self):
        base = RegionSet([Region(1, 2), Region(5, 6)])
        result = base.subtract(Region(0.5, 2.5))
        assert list(result) == [Region(5, 6)]

    def test_no_overlap_passes_through(self):
        base = RegionSet([Region(1, 2), Region(5, 6)])
        assert base.subtract(Region(3, 4)) == base

    def test_touching_boundaries_pass_through(self):
        base = RegionSet([Region(1, 2)])
        assert base.subtract(Region(2, 3)) == base
        assert base.subtract(Region(0, 1)) == base

    def test_exact_match_vanishes(self):
        assert len(RegionSet([Region(1, 2)]).subtract(Region(1, 2))) == 0

    def test_subtract_from_empty(self):
        assert len(RegionSet().subtract(Region(0, 1))) == 0

    def test_subtract_regions_function_preserves_order(self):
        result = subtract_region([Region(0, 2), Region(3, 5), Region(6, 8)], Region(1, 7))
        assert result == [Region(0, 1), Region(7, 8)]

    def test_result_disjoint_from_subtracted(self):
        rng = random.Random(3)
        region_set = RegionSet(random_regions(rng, 60))

        for eraser in random_regions(rng, 30):
            region_set = region_set.subtract(eraser)
            for region in region_set:
                assert not region.overlaps(eraser)
            assert_canonical(region_set)


@pytest.mark.unit
class TestRegionSetQueries:
    """Tests for coverage queries and serialization."""

    def test_total_duration(self):
        region_set = RegionSet([Region(0, 1), Region(2, 4)])
        assert region_set.total_duration() == pytest.approx(3.0)

    def test_total_duration_clipped(self):
        region_set = RegionSet([Region(0, 1), Region(2, 6), Region(7, 9)])
        assert region_set.total_duration(limit=5.0) == pytest.approx(4.0)

    def test_contains(self):
        region_set = RegionSet([Region(1, 2)])
        assert region_set.contains(1.0)
        assert region_set.contains(1.5)
        assert not region_set.contains(2.0)

    def test_list_round_trip(self):
        region_set = RegionSet([Region(0.1, 0.2), Region(1.5, 2.5)])
        assert RegionSet.from_list(region_set.to_list()) == region_set

    def test_empty_set_is_valid(self):
        region_set = RegionSet()
        assert len(region_set) == 0
        assert not region_set
        assert region_set.is_canonical()
