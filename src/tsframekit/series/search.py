"""Position searches over a series index.

All functions work on plain lists of floats and return storage
positions. Distance ties resolve to the earliest position.
"""

from __future__ import annotations

import bisect
from collections.abc import Sequence

import numpy as np

from tsframekit.core.errors import EContractViolation
from tsframekit.core.types import IndexOrder


def find_nearest(index: Sequence[float], at: float) -> int:
    """Position of the value closest to ``at``.

    Raises:
        EContractViolation: If ``index`` is empty
    """
    if not index:
        raise EContractViolation("Cannot search an empty index")
    # min() keeps the first of equal candidates
    return min(range(len(index)), key=lambda i: abs(index[i] - at))


def find_n_nearest(index: Sequence[float], n: int, at: float) -> list[int]:
    """Positions of up to ``n`` values closest to ``at``, nearest first."""
    if n < 1:
        raise EContractViolation(f"Cannot search for fewer than 1 element, got {n}")
    if not index:
        return []
    distances = np.abs(np.asarray(index, dtype=float) - at)
    return np.argsort(distances, kind="stable")[:n].tolist()


def find_before(index: Sequence[float], at: float) -> int | None:
    """Position of the largest value strictly below ``at``."""
    best: int | None = None
    for i, value in enumerate(index):
        if value < at and (best is None or value > index[best]):
            best = i
    return best


def find_after(index: Sequence[float], at: float) -> int | None:
    """Position of the smallest value strictly above ``at``."""
    best: int | None = None
    for i, value in enumerate(index):
        if value > at and (best is None or value < index[best]):
            best = i
    return best


def position_of(index: Sequence[float], at: float, order: IndexOrder) -> int | None:
    """Storage position of the first entry equal to ``at``, if any."""
    if order.is_ascending:
        i = bisect.bisect_left(index, at)
    elif order.is_descending:
        i = bisect.bisect_left(index, -at, key=lambda v: -v)
    else:
        try:
            return list(index).index(at)
        except ValueError:
            return None
    if i < len(index) and index[i] == at:
        return i
    return None


def sorted_slot(index: Sequence[float], at: float, order: IndexOrder) -> int:
    """Position where ``at`` should be inserted to keep ``order``.

    Duplicates go after existing equal entries. Unordered indexes grow
    at the tail.
    """
    if order.is_ascending:
        return bisect.bisect_right(index, at)
    if order.is_descending:
        return bisect.bisect_right(index, -at, key=lambda v: -v)
    return len(index)
