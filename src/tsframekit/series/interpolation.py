"""One-dimensional estimation over sparse series data.

Provides ``interp1`` which estimates values at query indexes from the
present (non-missing) points of a series.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

from tsframekit.core.errors import EContractViolation, EEmptySeries, EUnsupportedMethod
from tsframekit.core.types import EstimationMethod
from tsframekit.series.search import find_after, find_before, find_nearest


def resolve_method(method: EstimationMethod | str) -> EstimationMethod:
    """Normalize ``method`` and reject the unimplemented ones.

    Raises:
        EUnsupportedMethod: If the method is declared but not implemented
    """
    resolved = EstimationMethod(method)
    if not resolved.is_implemented:
        raise EUnsupportedMethod(
            f"Estimation method not supported: {resolved.value}",
            context={"method": resolved.value},
        )
    return resolved


def interp1(
    x: Sequence[float],
    y: Sequence[Any],
    query: Sequence[float],
    method: EstimationMethod | str = EstimationMethod.NEAREST,
    interpolable: bool = True,
) -> list[Any]:
    """Estimate values of ``y`` at each index in ``query``.

    Missing values (None) in ``y`` are excluded. A query that matches a
    present index exactly returns the stored value whatever the method.

    Args:
        x: Index values
        y: Data values aligned with ``x``; None marks a gap
        query: Indexes to estimate at
        method: ``nearest`` or ``nearlin``
        interpolable: Allow linear interpolation; when False ``nearlin``
            behaves like a nearest-neighbour search between the brackets

    Returns:
        One estimate per query index

    Raises:
        EContractViolation: If x and y differ in length
        EEmptySeries: If there are queries but no present data
        EUnsupportedMethod: If the method is not implemented
    """
    if len(x) != len(y):
        raise EContractViolation(
            "Data for x and y must be same size",
            context={"x": len(x), "y": len(y)},
        )
    method = resolve_method(method)
    if not x or not query:
        return []

    points = [(xi, yi) for xi, yi in zip(x, y) if yi is not None]
    if not points:
        raise EEmptySeries("No present values to estimate from", context={"size": len(x)})
    x_data = [p[0] for p in points]
    y_data = [p[1] for p in points]

    if method == EstimationMethod.NEAREST:
        return [y_data[find_nearest(x_data, q)] for q in query]
    return [_nearlin(x_data, y_data, q, interpolable) for q in query]


def _nearlin(x_data: list[float], y_data: list[Any], q: float, interpolable: bool) -> Any:
    i = find_nearest(x_data, q)
    if x_data[i] == q:
        return y_data[i]

    left = find_before(x_data, q)
    right = find_after(x_data, q)

    if left is not None and right is not None:
        y_left, y_right = y_data[left], y_data[right]
        if interpolable and _is_real(y_left) and _is_real(y_right):
            frac = (q - x_data[left]) / (x_data[right] - x_data[left])
            return float(y_left) + frac * (float(y_right) - float(y_left))
        if abs(x_data[left] - q) <= abs(x_data[right] - q):
            return y_left
        return y_right

    # Only one side has data
    return y_data[left if left is not None else right]


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
