"""Gap profiling for series and frames.

Summarizes where values are missing so callers can decide whether a
``fill`` will interpolate or only extrapolate.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from tsframekit.series.data_frame import DataFrame
from tsframekit.series.data_series import DataSeries
from tsframekit.series.time_series import TimeSeries


class GapClass(StrEnum):
    """Classification of a series' missing-value pattern."""

    EMPTY = "empty"
    """Series without any index."""

    COMPLETE = "complete"
    """No gaps."""

    GAPPY = "gappy"
    """Some gaps, mostly present values."""

    SPARSE = "sparse"
    """Missing values at or above the sparse threshold."""


@dataclass(frozen=True)
class GapProfile:
    """Missing-value profile of one series.

    Attributes:
        n_points: Number of index entries
        n_missing: Number of gaps
        missing_ratio: ``n_missing / n_points`` (0.0 for an empty series)
        longest_gap: Longest run of consecutive gaps
        leading_missing: Gaps before the first present value
        trailing_missing: Gaps after the last present value
        classification: GapClass value
    """

    n_points: int
    n_missing: int
    missing_ratio: float
    longest_gap: int
    leading_missing: int
    trailing_missing: int
    classification: GapClass

    @property
    def interior_missing(self) -> int:
        """Gaps that have present values on both sides."""
        if self.n_missing == self.n_points:
            return 0
        return self.n_missing - self.leading_missing - self.trailing_missing


def compute_gap_profile(
    series: DataSeries | TimeSeries,
    sparse_threshold: float = 0.5,
) -> GapProfile:
    """Compute the gap profile of a series.

    Args:
        series: Series to profile
        sparse_threshold: Missing ratio at which a series counts as sparse

    Returns:
        GapProfile with counts and classification
    """
    if not 0.0 < sparse_threshold <= 1.0:
        raise ValueError(f"sparse_threshold must be in (0, 1], got {sparse_threshold}")
    if isinstance(series, TimeSeries):
        series = series.series

    missing = np.array([v is None for v in series.data], dtype=bool)
    n = int(missing.size)
    n_missing = int(missing.sum())

    present_at = np.flatnonzero(~missing)
    if present_at.size:
        leading = int(present_at[0])
        trailing = n - 1 - int(present_at[-1])
    else:
        leading = trailing = n

    return GapProfile(
        n_points=n,
        n_missing=n_missing,
        missing_ratio=n_missing / n if n else 0.0,
        longest_gap=_longest_run(missing),
        leading_missing=leading,
        trailing_missing=trailing,
        classification=_classify(n, n_missing, sparse_threshold),
    )


def compute_frame_gap_profile(
    frame: DataFrame,
    sparse_threshold: float = 0.5,
) -> dict[str, GapProfile]:
    """Gap profile of every column, keyed by column name."""
    profiles: dict[str, GapProfile] = {}
    for name in frame.columns:
        column = frame.get(name)
        if column is not None:
            profiles[name] = compute_gap_profile(column, sparse_threshold)
    return profiles


def _longest_run(mask: np.ndarray) -> int:
    longest = current = 0
    for flag in mask:
        current = current + 1 if flag else 0
        longest = max(longest, current)
    return longest


def _classify(n: int, n_missing: int, sparse_threshold: float) -> GapClass:
    if n == 0:
        return GapClass.EMPTY
    if n_missing == 0:
        return GapClass.COMPLETE
    if n_missing / n >= sparse_threshold:
        return GapClass.SPARSE
    return GapClass.GAPPY
