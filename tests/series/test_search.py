"""Tests for series/search.py."""

from __future__ import annotations

import pytest

from tsframekit.core.errors import EContractViolation
from tsframekit.core.types import IndexOrder
from tsframekit.series.search import (
    find_after,
    find_before,
    find_n_nearest,
    find_nearest,
    position_of,
    sorted_slot,
)


class TestFindNearest:
    """Tests for find_nearest and find_n_nearest."""

    def test_nearest(self) -> None:
        assert find_nearest([1.0, 5.0, 9.0], 6.0) == 1

    def test_tie_prefers_earliest_position(self) -> None:
        assert find_nearest([0.0, 2.0], 1.0) == 0
        assert find_nearest([2.0, 0.0], 1.0) == 0

    def test_empty_raises(self) -> None:
        with pytest.raises(EContractViolation):
            find_nearest([], 1.0)

    def test_n_nearest_ordered_by_distance(self) -> None:
        assert find_n_nearest([0.0, 10.0, 4.0, 6.0], 3, 5.0) == [2, 3, 0]

    def test_n_nearest_caps_at_length(self) -> None:
        assert find_n_nearest([1.0, 2.0], 5, 0.0) == [0, 1]

    def test_n_nearest_empty_index(self) -> None:
        assert find_n_nearest([], 2, 0.0) == []

    def test_n_nearest_rejects_zero(self) -> None:
        with pytest.raises(EContractViolation):
            find_n_nearest([1.0], 0, 0.0)


class TestBrackets:
    """Tests for find_before and find_after."""

    def test_increasing(self) -> None:
        index = [1.0, 3.0, 5.0]
        assert find_before(index, 4.0) == 1
        assert find_after(index, 4.0) == 2

    def test_decreasing(self) -> None:
        """Brackets are found by value, not by storage direction."""
        index = [5.0, 3.0, 1.0]
        assert find_before(index, 4.0) == 1
        assert find_after(index, 4.0) == 0

    def test_strict(self) -> None:
        index = [1.0, 3.0, 5.0]
        assert find_before(index, 3.0) == 0
        assert find_after(index, 3.0) == 2

    def test_out_of_range(self) -> None:
        index = [1.0, 3.0]
        assert find_before(index, 1.0) is None
        assert find_after(index, 3.0) is None


class TestPositions:
    """Tests for position_of and sorted_slot."""

    @pytest.mark.parametrize(
        "index,order",
        [
            ([1.0, 2.0, 4.0], IndexOrder.INCREASING),
            ([4.0, 2.0, 1.0], IndexOrder.DECREASING),
            ([2.0, 4.0, 1.0], IndexOrder.UNORDERED_UNIQUE),
        ],
    )
    def test_position_of(self, index: list[float], order: IndexOrder) -> None:
        assert index[position_of(index, 4.0, order)] == 4.0
        assert position_of(index, 3.0, order) is None

    def test_position_of_duplicate_returns_first(self) -> None:
        assert position_of([1.0, 2.0, 2.0, 3.0], 2.0, IndexOrder.NON_DECREASING) == 1

    def test_sorted_slot_increasing(self) -> None:
        assert sorted_slot([1.0, 3.0], 2.0, IndexOrder.INCREASING) == 1
        assert sorted_slot([1.0, 3.0], 0.0, IndexOrder.INCREASING) == 0

    def test_sorted_slot_decreasing(self) -> None:
        assert sorted_slot([5.0, 3.0, 1.0], 4.0, IndexOrder.DECREASING) == 1
        assert sorted_slot([5.0, 3.0, 1.0], 0.0, IndexOrder.DECREASING) == 3

    def test_sorted_slot_duplicates_go_last(self) -> None:
        assert sorted_slot([1.0, 2.0, 2.0, 3.0], 2.0, IndexOrder.NON_DECREASING) == 3
        assert sorted_slot([3.0, 2.0, 2.0, 1.0], 2.0, IndexOrder.NON_INCREASING) == 3

    def test_sorted_slot_unordered_appends(self) -> None:
        assert sorted_slot([5.0, 1.0], 3.0, IndexOrder.UNORDERED) == 2
