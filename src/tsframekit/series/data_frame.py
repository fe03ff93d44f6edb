"""Named collection of index-aligned data series.

Each column is a ``DataSeries`` with its own element kind. Columns share
one index order, and every ``assign`` extends both the new column and the
existing ones with gaps so the frame stays aligned on the union index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pandas as pd

from tsframekit.core.config import DEFAULT_CONFIG, SeriesConfig
from tsframekit.core.errors import EContractViolation
from tsframekit.core.types import ColumnKind, EstimationMethod, IndexOrder
from tsframekit.series.data_series import DataSeries
from tsframekit.series.render import render_frame
from tsframekit.series.time_series import TimeSeries

logger = logging.getLogger(__name__)


class DataFrame:
    """Ordered, uniquely named set of data series.

    Args:
        *series: Initial columns (DataSeries or TimeSeries)
        config: Defaults used for fill and verification
    """

    def __init__(self, *series: DataSeries | TimeSeries, config: SeriesConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._columns: list[DataSeries] = []
        self.assign(*series)

    @classmethod
    def from_pandas(
        cls,
        df: pd.DataFrame,
        order: IndexOrder | str | None = None,
        config: SeriesConfig | None = None,
    ) -> DataFrame:
        """Build a frame from a pandas DataFrame with a numeric index."""
        columns = [
            DataSeries.from_pandas(df[col], order=order, name=str(col), config=config)
            for col in df.columns
        ]
        return cls(*columns, config=config)

    def to_pandas(self) -> pd.DataFrame:
        """Convert to a pandas DataFrame indexed by the union index."""
        if not self._columns:
            return pd.DataFrame()
        return pd.concat([s.to_pandas() for s in self._columns], axis=1)

    def copy(self) -> DataFrame:
        clone = DataFrame(config=self.config)
        clone._columns = [s.copy() for s in self._columns]
        return clone

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        return len(self._columns)

    @property
    def is_empty(self) -> bool:
        return not self._columns

    @property
    def is_complete(self) -> bool:
        return all(s.is_complete for s in self._columns)

    @property
    def columns(self) -> list[str]:
        return [s.name or "" for s in self._columns]

    @property
    def order(self) -> IndexOrder | None:
        return self._columns[0].order if self._columns else None

    @property
    def index(self) -> list[float]:
        """Union of every column's index values, in frame order."""
        if not self._columns:
            return []
        union = list(dict.fromkeys(i for s in self._columns for i in s.index))
        order = self._columns[0].order
        if order.is_ascending:
            union.sort()
        elif order.is_descending:
            union.sort(reverse=True)
        return union

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, column: object) -> bool:
        return self.contains(column)

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def __repr__(self) -> str:
        return f"DataFrame(columns={self.columns})"

    def __str__(self) -> str:
        if not self._columns:
            return "Empty DataFrame"
        return render_frame(
            self._columns[0].index,
            [(s.name or "n/a", s.data, s.max_column_width) for s in self._columns],
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def contains(self, column: object) -> bool:
        return any(s.name == column for s in self._columns)

    def get(
        self,
        column: str,
        kind: ColumnKind | str | type | None = None,
    ) -> DataSeries | None:
        """Return a copy of ``column``.

        A column that has never held a present value reports ``float``
        until its first value arrives, so asking for another kind returns
        None even though the column could still take that kind.

        Args:
            column: Column name
            kind: Expected element kind; a mismatch returns None

        Returns:
            The column, or None when it is missing or of another kind
        """
        found = self._find(column)
        if found is None:
            return None
        if kind is not None:
            expected = ColumnKind.from_type(kind)
            if found.kind != expected:
                logger.warning(
                    "Can't get %s column '%s' as %s", found.kind.value, column, expected.value
                )
                return None
        return found.copy()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def assign(self, *series: DataSeries | TimeSeries) -> None:
        """Add columns, aligning every column on the union index.

        Each incoming series gets a unique name (``column_<n>`` when
        unnamed, ``_1``, ``_2``, ... suffixes on collision). The incoming
        and existing columns receive gaps at each other's missing indexes.

        Gaps are added per distinct index value, so columns with repeated
        index values (non-unique orders) do not end up row-aligned; such
        frames are also refused by ``fill_index``.

        Raises:
            EContractViolation: If the series' orders differ from each other
                or from the frame's; nothing is added in that case
        """
        columns = [
            (s.series if isinstance(s, TimeSeries) else s).copy() for s in series
        ]
        orders = {s.order for s in self._columns} | {c.order for c in columns}
        if len(orders) > 1:
            raise EContractViolation(
                "All columns in a frame must share one index order",
                context={
                    "frame": self.order.value if self.order else None,
                    "incoming": [c.order.value for c in columns],
                },
            )
        if orders and not next(iter(orders)).is_unique and self.count + len(columns) > 1:
            logger.warning(
                "Aligning %s columns by distinct index values; rows may not line up",
                next(iter(orders)).value,
            )

        for column in columns:
            column.name = self._unique_name(column.name or f"column_{self.count + 1}")

            incoming_index = column.index
            for existing in self._columns:
                _add_gaps(column, existing.index)
            for existing in self._columns:
                _add_gaps(existing, incoming_index)

            self._columns.append(column)

    def insert(self, column: str, value: Any, at: float, verify: bool | None = None) -> bool:
        """Insert into one column only.

        The other columns are not extended; call ``fill_index`` to realign.

        Returns:
            True if inserted, False if the column is missing or refused the insert
        """
        found = self._find(column)
        if found is None:
            return False
        return found.insert(value, at, verify=verify)

    def fill(self, method: EstimationMethod | str | None = None) -> None:
        """Fill the gaps of every column independently."""
        for s in self._columns:
            s.fill(method=method or self.config.method)

    def fill_index(self) -> bool:
        """Extend every column with gaps at the union index.

        Only frames whose columns are all sorted with unique indexes can
        be realigned; anything else is left untouched.

        Returns:
            True if the frame was realigned, False if it was refused
        """
        if not all(s.order.is_sorted and s.order.is_unique for s in self._columns):
            logger.warning(
                "fill_index needs sorted, unique columns; got %s",
                sorted({s.order.value for s in self._columns}),
            )
            return False
        union = self.index
        for s in self._columns:
            _add_gaps(s, union)
        return True

    def copy_with_filled_index(self) -> DataFrame:
        """Return a copy aligned on the union index."""
        clone = self.copy()
        clone.fill_index()
        return clone

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find(self, column: str) -> DataSeries | None:
        for s in self._columns:
            if s.name == column:
                return s
        return None

    def _unique_name(self, root: str) -> str:
        name = root
        suffix = 1
        while self.contains(name):
            name = f"{root}_{suffix}"
            suffix += 1
        return name


def _add_gaps(series: DataSeries, index: list[float]) -> None:
    """Insert a gap at each index value ``series`` does not already hold."""
    held = set(series.index)
    for at in index:
        if at in held:
            continue
        if not series.insert(None, at, verify=True):
            raise EContractViolation(
                "Failed to add a gap to series", context={"name": series.name, "index": at}
            )
        held.add(at)
