"""Ordered, sparse data series.

A ``DataSeries`` is one column of optional values positionally aligned
with a numeric index. The index respects a declared ``IndexOrder`` after
every mutation. A ``None`` value marks a gap: the index exists but its
value is missing, which is different from the index being absent.

Usage:
    >>> s = DataSeries([12.3, None, 45.3], name="temp")
    >>> s.fill()
    >>> s.data
    [12.3, 28.8, 45.3]
"""

from __future__ import annotations

import copy
import logging
import math
import re
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, NamedTuple

import numpy as np
import pandas as pd

from tsframekit.core.config import DEFAULT_CONFIG, MIN_COLUMN_WIDTH, SeriesConfig
from tsframekit.core.errors import EContractViolation, EEmptySeries
from tsframekit.core.types import ColumnKind, EstimationMethod, IndexOrder
from tsframekit.series.interpolation import interp1, resolve_method
from tsframekit.series.render import render_series
from tsframekit.series.search import find_n_nearest, find_nearest, position_of, sorted_slot

logger = logging.getLogger(__name__)


class Present(NamedTuple):
    """Non-missing entries of a series and their storage positions."""

    index: list[float]
    data: list[Any]
    locations: list[int]


def is_missing(value: Any) -> bool:
    """True for None and float NaN."""
    return value is None or (isinstance(value, float) and math.isnan(value))


def sanitize_name(name: Any) -> str | None:
    """Column names carry no whitespace; runs of it become ``-``."""
    if name is None:
        return None
    return re.sub(r"\s+", "-", str(name))


class DataSeries:
    """A single ordered column of optional values.

    Construction validates the index: a length mismatch, an index that
    breaks ``order`` or an unsupported element type raises
    ``EContractViolation``. Mutations that would break the order are
    refused through a False return instead.

    Args:
        data: Values; None (or NaN) marks a gap
        index: Index values (default: 0, 1, ..., n-1)
        order: Declared index order (default: increasing)
        name: Column name
        max_column_width: Render width limit (at least 5)
        kind: Element kind; inferred from the present data when omitted
        config: Defaults for method, verification and rendering
    """

    def __init__(
        self,
        data: Iterable[Any] = (),
        index: Iterable[float] | None = None,
        order: IndexOrder | str = IndexOrder.INCREASING,
        name: str | None = None,
        max_column_width: int | None = None,
        kind: ColumnKind | str | type | None = None,
        config: SeriesConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.order = IndexOrder(order)
        self.name = sanitize_name(name)
        if max_column_width is None:
            self.max_column_width = self.config.column_width
        else:
            self.max_column_width = max(max_column_width, MIN_COLUMN_WIDTH)

        values = [None if is_missing(v) else v for v in data]
        if kind is None:
            self.kind = ColumnKind.infer(values)
            # An untyped series without data takes the kind of its first value
            self._kind_fixed = any(v is not None for v in values)
        else:
            self.kind = ColumnKind.from_type(kind)
            self._kind_fixed = True
        self._data: list[Any] = [self.kind.coerce(v) for v in values]

        if index is None:
            self._index: list[float] = [float(i) for i in range(len(values))]
        else:
            self._index = [float(i) for i in index]
            if len(self._index) != len(self._data):
                raise EContractViolation(
                    "Index and data must match in size",
                    context={"index": len(self._index), "data": len(self._data)},
                )
            if any(math.isnan(i) for i in self._index):
                raise EContractViolation(
                    "Index values must not be NaN", context={"name": self.name}
                )
            if not self.order.verify(self._index):
                raise EContractViolation(
                    f"Index is not {self.order.value}",
                    context={"name": self.name, "order": self.order.value},
                    fix_hint="Sort the index or declare a weaker order",
                )

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_start(
        cls,
        data: Sequence[Any],
        start: float,
        step: float,
        **kwargs: Any,
    ) -> DataSeries:
        """Build a series on the fixed cadence ``start + i * step``."""
        index = (start + step * np.arange(len(data), dtype=float)).tolist()
        return cls(data, index=index, **kwargs)

    @classmethod
    def from_pandas(
        cls,
        series: pd.Series,
        order: IndexOrder | str | None = None,
        name: str | None = None,
        kind: ColumnKind | str | type | None = None,
        config: SeriesConfig | None = None,
    ) -> DataSeries:
        """Convert a pandas Series with a numeric index.

        NaN and None become gaps. The order is inferred from the index
        when not given.
        """
        index = [float(v) for v in series.index]
        values = [None if pd.isna(v) else v for v in series.tolist()]
        if order is None:
            order = IndexOrder.infer(index)
        return cls(
            values,
            index=index,
            order=order,
            name=series.name if name is None else name,
            kind=kind,
            config=config,
        )

    def to_pandas(self) -> pd.Series:
        """Convert to a pandas Series indexed by the float index.

        Float series use NaN for gaps; other kinds use object dtype.
        """
        index = pd.Index(self._index, dtype=float)
        if self.kind == ColumnKind.FLOAT:
            values = [np.nan if v is None else v for v in self._data]
            return pd.Series(values, index=index, name=self.name, dtype=float)
        return pd.Series(list(self._data), index=index, name=self.name, dtype=object)

    def copy(self) -> DataSeries:
        clone = copy.copy(self)
        clone._index = list(self._index)
        clone._data = list(self._data)
        return clone

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def index(self) -> list[float]:
        return list(self._index)

    @property
    def data(self) -> list[Any]:
        return list(self._data)

    @property
    def count(self) -> int:
        return len(self._data)

    @property
    def is_empty(self) -> bool:
        return not self._index

    @property
    def is_complete(self) -> bool:
        return all(v is not None for v in self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[float, Any]]:
        return iter(zip(self._index, self._data))

    def __getitem__(self, at: float) -> Any:
        """Value stored at exactly ``at``; None if absent or missing."""
        i = position_of(self._index, float(at), self.order)
        return None if i is None else self._data[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataSeries):
            return NotImplemented
        return (
            self._index == other._index
            and self._data == other._data
            and self.order == other.order
            and self.kind == other.kind
            and self.name == other.name
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"DataSeries(name={self.name!r}, kind={self.kind.value}, "
            f"order={self.order.value}, count={self.count})"
        )

    def __str__(self) -> str:
        return render_series(self._index, self._data, self.name, self.max_column_width)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, value: Any, at: float, verify: bool | None = None) -> bool:
        """Append ``value`` at the end of the series, if able.

        The new index must come after the current last index under the
        series order. See ``insert`` for what else makes an append fail.

        Returns:
            True if the value was appended, False if nothing changed
        """
        at = float(at)
        if self._index and not self.order.allows(self._index[-1], at):
            logger.debug(
                "Refused append at %s to %s series %s", at, self.order.value, self.name
            )
            return False
        return self.insert(value, at, verify=verify)

    def insert(self, value: Any, at: float, verify: bool | None = None) -> bool:
        """Insert ``value`` at index ``at`` in its sorted position.

        A duplicate index in a unique order is refused when ``verify`` is
        true. With verification off the insert goes through and the order
        is downgraded to its non-unique counterpart. A NaN index is
        always refused.

        Args:
            value: Value to insert; None inserts a gap
            at: Index to insert at
            verify: Reject duplicates (default: ``config.verify``)

        Returns:
            True if the value was inserted, False if nothing changed
        """
        if verify is None:
            verify = self.config.verify
        at = float(at)
        if math.isnan(at):
            logger.debug("Refused NaN index in series %s", self.name)
            return False
        value, kind = self._coerce(value)

        if self.order.is_unique and position_of(self._index, at, self.order) is not None:
            if verify:
                logger.debug("Refused duplicate index %s in series %s", at, self.name)
                return False
            self.order = self.order.downgraded()

        if kind is not None:
            self.kind = kind
            self._kind_fixed = True
        slot = sorted_slot(self._index, at, self.order)
        self._index.insert(slot, at)
        self._data.insert(slot, value)
        return True

    def fill(self, method: EstimationMethod | str | None = None) -> None:
        """Replace every gap with an estimate from the present values."""
        method = resolve_method(method or self.config.method)
        gaps = [i for i, v in enumerate(self._data) if v is None]
        if not gaps:
            return
        if len(gaps) == len(self._data):
            logger.warning("Series %s has no present values to fill from", self.name)
            return

        estimates = interp1(
            self._index,
            self._data,
            [self._index[i] for i in gaps],
            method=method,
            interpolable=self.kind.is_interpolable,
        )
        for i, estimate in zip(gaps, estimates):
            self._data[i] = self.kind.coerce(estimate)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def present(self) -> Present:
        """Return the non-missing entries and their storage positions."""
        locations = [i for i, v in enumerate(self._data) if v is not None]
        return Present(
            index=[self._index[i] for i in locations],
            data=[self._data[i] for i in locations],
            locations=locations,
        )

    def get_nearest(self, at: float) -> tuple[float, Any]:
        """Present entry whose index is closest to ``at``.

        Raises:
            EEmptySeries: If the series has no present values
        """
        present = self.present()
        if not present.index:
            raise EEmptySeries("Cannot find in empty series", context={"name": self.name})
        i = find_nearest(present.index, float(at))
        return present.index[i], present.data[i]

    def get_n_nearest(self, n: int, at: float) -> list[tuple[float, Any]]:
        """Up to ``n`` present entries closest to ``at``, nearest first."""
        if n < 1:
            raise EContractViolation(f"Cannot search for fewer than 1 element, got {n}")
        present = self.present()
        positions = find_n_nearest(present.index, n, float(at))
        return [(present.index[i], present.data[i]) for i in positions]

    def query(self, at: float, method: EstimationMethod | str | None = None) -> Any:
        """Estimate the value at ``at``.

        Raises:
            EEmptySeries: If the series is empty or has no present values
            EUnsupportedMethod: If the method is not implemented
        """
        method = resolve_method(method or self.config.method)
        if self.is_empty:
            raise EEmptySeries("Cannot query empty series", context={"name": self.name})
        return self.query_many([at], method=method)[0]

    def query_many(
        self,
        indexes: Iterable[float],
        method: EstimationMethod | str | None = None,
    ) -> list[Any]:
        """Estimate the value at each of ``indexes``.

        An empty series or an empty query yields an empty list.
        """
        method = resolve_method(method or self.config.method)
        if self.is_empty:
            return []
        return interp1(
            self._index,
            self._data,
            [float(i) for i in indexes],
            method=method,
            interpolable=self.kind.is_interpolable,
        )

    def between(self, lo: float, hi: float) -> list[tuple[float, Any]]:
        """Entries whose index lies strictly between ``lo`` and ``hi``."""
        self._require_strict_order("slice")
        return [(i, v) for i, v in zip(self._index, self._data) if lo < i < hi]

    def window(
        self,
        lo: float,
        hi: float,
        method: EstimationMethod | str | None = None,
    ) -> list[tuple[float, Any]]:
        """Entries inside ``[lo, hi]`` with estimated values at both ends.

        The end points are always present in the result, estimated with
        ``method`` when the series has no entry there.
        """
        self._require_strict_order("slice")
        if lo > hi:
            raise EContractViolation(
                "Window lower bound exceeds upper bound", context={"lo": lo, "hi": hi}
            )
        lower = (float(lo), self.query(lo, method=method))
        upper = (float(hi), self.query(hi, method=method))
        inside = self.between(lo, hi)
        if self.order == IndexOrder.INCREASING:
            return [lower, *inside, upper]
        return [upper, *inside, lower]

    def resample(
        self,
        start: float,
        step: float,
        n: int,
        name: str | None = None,
        method: EstimationMethod | str | None = None,
    ) -> DataSeries:
        """Sample the series at ``n`` points ``start + i * step``.

        Args:
            start: First sampled index
            step: Index increment between samples
            n: Number of samples
            name: Name of the resampled series
            method: Estimation method (default: ``config.method``)

        Returns:
            New series with the same order, kind and config
        """
        if n < 0:
            raise EContractViolation(f"Sample count must be non-negative, got {n}")
        if n > 0 and self.is_empty:
            raise EEmptySeries("Cannot resample empty series", context={"name": self.name})
        indexes = (start + step * np.arange(n, dtype=float)).tolist()
        values = self.query_many(indexes, method=method)
        return DataSeries(
            values,
            index=indexes,
            order=self.order,
            name=name,
            max_column_width=self.max_column_width,
            kind=self.kind,
            config=self.config,
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def minus(self, other: DataSeries, method: EstimationMethod | str | None = None) -> DataSeries:
        """Subtract ``other`` from this series on this series' index.

        ``other`` is estimated at every index of this series with
        ``method``; its own extra indexes play no part. Gaps in this
        series stay gaps.

        Raises:
            EContractViolation: If the orders differ or a kind is not numeric
        """
        if self.order != other.order:
            raise EContractViolation(
                "Can't difference differently ordered series",
                context={"self": self.order.value, "other": other.order.value},
            )
        if not (self.kind.is_numeric and other.kind.is_numeric):
            raise EContractViolation(
                f"Unsupported series type: {self.kind.value} - {other.kind.value}",
                fix_hint="Only int and float series can be subtracted",
            )
        kind = (
            ColumnKind.FLOAT
            if ColumnKind.FLOAT in (self.kind, other.kind)
            else ColumnKind.INT
        )

        present = self.present()
        if present.index and other.is_empty:
            raise EEmptySeries("Cannot subtract an empty series", context={"name": other.name})
        estimates = other.query_many(present.index, method=method)

        values: list[Any] = [None] * self.count
        for loc, mine, theirs in zip(present.locations, present.data, estimates):
            values[loc] = mine - theirs

        return DataSeries(
            values,
            index=self._index,
            order=self.order,
            max_column_width=self.max_column_width,
            kind=kind,
            config=self.config,
        )

    def mse(self, other: DataSeries, method: EstimationMethod | str | None = None) -> float:
        """Mean squared difference against ``other`` (NaN if nothing to compare)."""
        diffs = self.minus(other, method=method).present().data
        if not diffs:
            return float("nan")
        return float(np.mean(np.square(np.asarray(diffs, dtype=float))))

    def rms(self, other: DataSeries, method: EstimationMethod | str | None = None) -> float:
        """Root of ``mse``."""
        return float(np.sqrt(self.mse(other, method=method)))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _coerce(self, value: Any) -> tuple[Any, ColumnKind | None]:
        """Coerced value plus the kind it fixes, if the series has none yet."""
        if is_missing(value):
            return None, None
        if not self._kind_fixed:
            kind = ColumnKind.of(value)
            return kind.coerce(value), kind
        return self.kind.coerce(value), None

    def _require_strict_order(self, operation: str) -> None:
        if self.order not in (IndexOrder.INCREASING, IndexOrder.DECREASING):
            raise EContractViolation(
                f"Cannot {operation} {self.order.value} series",
                fix_hint="Slicing needs an increasing or decreasing series",
            )
