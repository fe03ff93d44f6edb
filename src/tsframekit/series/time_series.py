"""Timestamp-indexed view over a DataSeries.

Timestamps map to the numeric index as Unix epoch seconds. Naive
timestamps are taken as UTC; index values come back as UTC-aware
``pandas.Timestamp`` objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, NamedTuple

import pandas as pd

from tsframekit.core.config import SeriesConfig
from tsframekit.core.errors import EContractViolation
from tsframekit.core.types import ColumnKind, EstimationMethod, IndexOrder
from tsframekit.series.data_series import DataSeries
from tsframekit.series.render import render_series

TimeLike = pd.Timestamp | datetime | str
StepLike = float | int | pd.Timedelta | str


def to_seconds(value: TimeLike) -> float:
    """Epoch seconds for a timestamp-like value (naive means UTC)."""
    stamp = pd.Timestamp(value)
    if stamp.tzinfo is None:
        stamp = stamp.tz_localize("UTC")
    return stamp.timestamp()


def from_seconds(seconds: float) -> pd.Timestamp:
    return pd.Timestamp(seconds, unit="s", tz="UTC")


def step_seconds(step: StepLike) -> float:
    """Step length in seconds from a number, Timedelta or alias like ``"1min"``."""
    if isinstance(step, (int, float)) and not isinstance(step, bool):
        return float(step)
    return pd.Timedelta(step).total_seconds()


class TimePresent(NamedTuple):
    """Non-missing entries of a time series and their storage positions."""

    index: list[pd.Timestamp]
    data: list[Any]
    locations: list[int]


class TimeSeries:
    """A DataSeries whose index is a sequence of timestamps.

    Every operation translates timestamps to epoch seconds, delegates to
    the wrapped series and translates index results back.

    Args:
        data: Values; None marks a gap
        index: Timestamps aligned with ``data``
        order: Declared index order (default: increasing)
        name: Column name
        max_column_width: Render width limit
        kind: Element kind; inferred when omitted
        config: Defaults for method, verification and time format
    """

    def __init__(
        self,
        data: Sequence[Any] = (),
        index: Iterable[TimeLike] | None = None,
        order: IndexOrder | str = IndexOrder.INCREASING,
        name: str | None = None,
        max_column_width: int | None = None,
        kind: ColumnKind | str | type | None = None,
        config: SeriesConfig | None = None,
    ) -> None:
        if index is None:
            if len(data) > 0:
                raise EContractViolation(
                    "TimeSeries needs an index for its data",
                    fix_hint="Pass index= or build with TimeSeries.from_start",
                )
            index = []
        self.series = DataSeries(
            data,
            index=[to_seconds(t) for t in index],
            order=order,
            name=name,
            max_column_width=max_column_width,
            kind=kind,
            config=config,
        )

    @classmethod
    def wrap(cls, series: DataSeries) -> TimeSeries:
        """View an existing epoch-seconds DataSeries as a TimeSeries."""
        view = cls.__new__(cls)
        view.series = series
        return view

    @classmethod
    def from_start(
        cls,
        data: Sequence[Any],
        start: TimeLike,
        step: StepLike,
        **kwargs: Any,
    ) -> TimeSeries:
        """Build a series on a fixed cadence beginning at ``start``."""
        return cls.wrap(
            DataSeries.from_start(data, to_seconds(start), step_seconds(step), **kwargs)
        )

    @classmethod
    def from_pandas(
        cls,
        series: pd.Series,
        order: IndexOrder | str | None = None,
        name: str | None = None,
        kind: ColumnKind | str | type | None = None,
        config: SeriesConfig | None = None,
    ) -> TimeSeries:
        """Convert a pandas Series with a DatetimeIndex."""
        seconds = series.copy()
        seconds.index = pd.Index([to_seconds(t) for t in series.index], dtype=float)
        return cls.wrap(
            DataSeries.from_pandas(seconds, order=order, name=name, kind=kind, config=config)
        )

    def to_pandas(self) -> pd.Series:
        result = self.series.to_pandas()
        result.index = pd.to_datetime(self.series.index, unit="s", utc=True)
        return result

    def copy(self) -> TimeSeries:
        return TimeSeries.wrap(self.series.copy())

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def index(self) -> list[pd.Timestamp]:
        return [from_seconds(s) for s in self.series.index]

    @property
    def data(self) -> list[Any]:
        return self.series.data

    @property
    def count(self) -> int:
        return self.series.count

    @property
    def is_empty(self) -> bool:
        return self.series.is_empty

    @property
    def is_complete(self) -> bool:
        return self.series.is_complete

    @property
    def name(self) -> str | None:
        return self.series.name

    @property
    def order(self) -> IndexOrder:
        return self.series.order

    @property
    def kind(self) -> ColumnKind:
        return self.series.kind

    @property
    def max_column_width(self) -> int | None:
        return self.series.max_column_width

    @property
    def config(self) -> SeriesConfig:
        return self.series.config

    def __len__(self) -> int:
        return len(self.series)

    def __getitem__(self, at: TimeLike) -> Any:
        return self.series[to_seconds(at)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self.series == other.series

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"TimeSeries(name={self.name!r}, kind={self.kind.value}, "
            f"order={self.order.value}, count={self.count})"
        )

    def __str__(self) -> str:
        labels = [t.strftime(self.config.time_format) for t in self.index]
        return render_series(labels, self.series.data, self.name, self.max_column_width)

    # ------------------------------------------------------------------
    # Delegated operations
    # ------------------------------------------------------------------

    def append(self, value: Any, at: TimeLike, verify: bool | None = None) -> bool:
        return self.series.append(value, to_seconds(at), verify=verify)

    def insert(self, value: Any, at: TimeLike, verify: bool | None = None) -> bool:
        return self.series.insert(value, to_seconds(at), verify=verify)

    def fill(self, method: EstimationMethod | str | None = None) -> None:
        self.series.fill(method=method)

    def present(self) -> TimePresent:
        present = self.series.present()
        return TimePresent(
            index=[from_seconds(s) for s in present.index],
            data=present.data,
            locations=present.locations,
        )

    def get_nearest(self, at: TimeLike) -> tuple[pd.Timestamp, Any]:
        seconds, value = self.series.get_nearest(to_seconds(at))
        return from_seconds(seconds), value

    def get_n_nearest(self, n: int, at: TimeLike) -> list[tuple[pd.Timestamp, Any]]:
        found = self.series.get_n_nearest(n, to_seconds(at))
        return [(from_seconds(s), v) for s, v in found]

    def query(self, at: TimeLike, method: EstimationMethod | str | None = None) -> Any:
        return self.series.query(to_seconds(at), method=method)

    def query_many(
        self,
        indexes: Iterable[TimeLike],
        method: EstimationMethod | str | None = None,
    ) -> list[Any]:
        return self.series.query_many([to_seconds(t) for t in indexes], method=method)

    def between(self, lo: TimeLike, hi: TimeLike) -> list[tuple[pd.Timestamp, Any]]:
        found = self.series.between(to_seconds(lo), to_seconds(hi))
        return [(from_seconds(s), v) for s, v in found]

    def window(
        self,
        lo: TimeLike,
        hi: TimeLike,
        method: EstimationMethod | str | None = None,
    ) -> list[tuple[pd.Timestamp, Any]]:
        found = self.series.window(to_seconds(lo), to_seconds(hi), method=method)
        return [(from_seconds(s), v) for s, v in found]

    def resample(
        self,
        start: TimeLike,
        step: StepLike,
        n: int,
        name: str | None = None,
        method: EstimationMethod | str | None = None,
    ) -> TimeSeries:
        """Sample ``n`` points every ``step`` beginning at ``start``."""
        resampled = self.series.resample(
            to_seconds(start), step_seconds(step), n, name=name, method=method
        )
        return TimeSeries.wrap(resampled)

    def minus(self, other: TimeSeries, method: EstimationMethod | str | None = None) -> TimeSeries:
        return TimeSeries.wrap(self.series.minus(other.series, method=method))

    def mse(self, other: TimeSeries, method: EstimationMethod | str | None = None) -> float:
        return self.series.mse(other.series, method=method)

    def rms(self, other: TimeSeries, method: EstimationMethod | str | None = None) -> float:
        return self.series.rms(other.series, method=method)
