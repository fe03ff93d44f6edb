"""Tests for series/gaps.py."""

from __future__ import annotations

import pytest

from tsframekit.series.data_frame import DataFrame
from tsframekit.series.data_series import DataSeries
from tsframekit.series.gaps import GapClass, compute_frame_gap_profile, compute_gap_profile
from tsframekit.series.time_series import TimeSeries


class TestGapProfile:
    """Tests for compute_gap_profile."""

    def test_interior_gaps(self) -> None:
        profile = compute_gap_profile(DataSeries([12.3, None, 45.3, None, None, None, 123.1]))
        assert profile.n_points == 7
        assert profile.n_missing == 4
        assert profile.longest_gap == 3
        assert profile.leading_missing == 0
        assert profile.trailing_missing == 0
        assert profile.interior_missing == 4
        assert profile.classification == GapClass.SPARSE

    def test_edges(self) -> None:
        profile = compute_gap_profile(DataSeries([None, 1.0, 2.0, 3.0, None, None]))
        assert profile.leading_missing == 1
        assert profile.trailing_missing == 2
        assert profile.interior_missing == 0
        assert profile.missing_ratio == pytest.approx(0.5)

    def test_gappy(self) -> None:
        profile = compute_gap_profile(DataSeries([1.0, None, 3.0, 4.0]))
        assert profile.classification == GapClass.GAPPY

    def test_threshold(self) -> None:
        series = DataSeries([1.0, None, 3.0, 4.0])
        assert compute_gap_profile(series, sparse_threshold=0.25).classification == GapClass.SPARSE

    def test_complete_and_empty(self) -> None:
        assert compute_gap_profile(DataSeries([1.0])).classification == GapClass.COMPLETE
        empty = compute_gap_profile(DataSeries())
        assert empty.classification == GapClass.EMPTY
        assert empty.missing_ratio == 0.0

    def test_all_missing(self) -> None:
        profile = compute_gap_profile(DataSeries([None, None]))
        assert profile.leading_missing == 2
        assert profile.interior_missing == 0
        assert profile.classification == GapClass.SPARSE

    def test_time_series(self) -> None:
        ts = TimeSeries.from_start([1.0, None], start="2024-01-01", step=60)
        assert compute_gap_profile(ts).trailing_missing == 1

    @pytest.mark.parametrize("threshold", [0.0, 1.5])
    def test_invalid_threshold(self, threshold: float) -> None:
        with pytest.raises(ValueError, match="sparse_threshold"):
            compute_gap_profile(DataSeries([1.0]), sparse_threshold=threshold)


class TestFrameGapProfile:
    def test_per_column(self) -> None:
        df = DataFrame(
            DataSeries([1.0, 3.0], index=[1.0, 3.0], name="a"),
            DataSeries([2.0, 4.0], index=[2.0, 4.0], name="b"),
        )
        profiles = compute_frame_gap_profile(df)
        assert set(profiles) == {"a", "b"}
        assert profiles["a"].trailing_missing == 1
        assert profiles["b"].leading_missing == 1
        df.fill()
        assert all(
            p.classification == GapClass.COMPLETE for p in compute_frame_gap_profile(df).values()
        )
