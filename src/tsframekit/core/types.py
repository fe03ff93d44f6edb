"""Shared type definitions for tsframekit.

Enumerations used across the trie and series modules.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from enum import StrEnum
from typing import Any

import numpy as np

from tsframekit.core.errors import EContractViolation


class IndexOrder(StrEnum):
    """How the index values of a series are ordered."""

    DECREASING = "decreasing"
    """Sorted large-to-small, no duplicates."""

    INCREASING = "increasing"
    """Sorted small-to-large, no duplicates."""

    NON_DECREASING = "non_decreasing"
    """Sorted small-to-large, duplicates allowed."""

    NON_INCREASING = "non_increasing"
    """Sorted large-to-small, duplicates allowed."""

    UNORDERED_UNIQUE = "unordered_unique"
    """Not sorted, no duplicates."""

    UNORDERED = "unordered"
    """Not sorted, duplicates allowed."""

    @property
    def is_sorted(self) -> bool:
        return self in _SORTED_ORDERS

    @property
    def is_unique(self) -> bool:
        return self in _UNIQUE_ORDERS

    @property
    def is_ascending(self) -> bool:
        return self in (IndexOrder.INCREASING, IndexOrder.NON_DECREASING)

    @property
    def is_descending(self) -> bool:
        return self in (IndexOrder.DECREASING, IndexOrder.NON_INCREASING)

    def allows(self, previous: float, following: float) -> bool:
        """Check whether ``following`` may come right after ``previous``."""
        if self == IndexOrder.INCREASING:
            return previous < following
        if self == IndexOrder.DECREASING:
            return previous > following
        if self == IndexOrder.NON_DECREASING:
            return previous <= following
        if self == IndexOrder.NON_INCREASING:
            return previous >= following
        return True

    def verify(self, index: Iterable[float]) -> bool:
        """Return True if the whole index satisfies this order."""
        values = list(index)
        if self.is_sorted:
            return all(self.allows(a, b) for a, b in zip(values, values[1:]))
        if self == IndexOrder.UNORDERED_UNIQUE:
            return len(set(values)) == len(values)
        return True

    def downgraded(self) -> IndexOrder:
        """Order that results from admitting a duplicate index."""
        return _DOWNGRADES.get(self, self)

    @classmethod
    def infer(cls, index: Iterable[float]) -> IndexOrder:
        """Return the strictest order satisfied by ``index``."""
        values = list(index)
        for order in (
            cls.INCREASING,
            cls.DECREASING,
            cls.NON_DECREASING,
            cls.NON_INCREASING,
            cls.UNORDERED_UNIQUE,
        ):
            if order.verify(values):
                return order
        return cls.UNORDERED


_SORTED_ORDERS = frozenset(
    {
        IndexOrder.DECREASING,
        IndexOrder.INCREASING,
        IndexOrder.NON_DECREASING,
        IndexOrder.NON_INCREASING,
    }
)
_UNIQUE_ORDERS = frozenset(
    {IndexOrder.DECREASING, IndexOrder.INCREASING, IndexOrder.UNORDERED_UNIQUE}
)
_DOWNGRADES = {
    IndexOrder.INCREASING: IndexOrder.NON_DECREASING,
    IndexOrder.DECREASING: IndexOrder.NON_INCREASING,
    IndexOrder.UNORDERED_UNIQUE: IndexOrder.UNORDERED,
}


class EstimationMethod(StrEnum):
    """Methods for estimating a value at an index.

    Only ``nearest`` and ``nearlin`` are implemented; the rest are part of
    the declared vocabulary and are rejected at query time.
    """

    NEAREST = "nearest"
    NEARLIN = "nearlin"
    LINREG = "linreg"
    LINTERP = "linterp"
    NEXT = "next"
    PREVIOUS = "previous"
    SPLINE = "spline"
    GAUSSPROC = "gaussproc"

    @property
    def is_implemented(self) -> bool:
        return self in (EstimationMethod.NEAREST, EstimationMethod.NEARLIN)


class ColumnKind(StrEnum):
    """Closed set of element types a series can hold."""

    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    STR = "str"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnKind.FLOAT, ColumnKind.INT)

    @property
    def is_interpolable(self) -> bool:
        return self == ColumnKind.FLOAT

    def accepts(self, value: Any) -> bool:
        """Check whether ``value`` can be stored in a column of this kind."""
        if value is None:
            return True
        is_bool = isinstance(value, (bool, np.bool_))
        if self == ColumnKind.BOOL:
            return is_bool
        if self == ColumnKind.STR:
            return isinstance(value, str)
        if is_bool:
            return False
        if self == ColumnKind.INT:
            return isinstance(value, numbers.Integral)
        return isinstance(value, numbers.Real)

    def coerce(self, value: Any) -> Any:
        """Convert ``value`` to the Python type of this kind.

        Raises:
            EContractViolation: If the value does not belong to this kind
        """
        if value is None:
            return None
        if not self.accepts(value):
            raise EContractViolation(
                f"Cannot store {type(value).__name__} value in a {self.value} series",
                context={"value": repr(value), "kind": self.value},
            )
        return self.python_type(value)

    @classmethod
    def of(cls, value: Any) -> ColumnKind:
        """Kind of a single non-missing value."""
        if isinstance(value, (bool, np.bool_)):
            return cls.BOOL
        if isinstance(value, str):
            return cls.STR
        if isinstance(value, numbers.Integral):
            return cls.INT
        if isinstance(value, numbers.Real):
            return cls.FLOAT
        raise EContractViolation(
            f"Unsupported element type: {type(value).__name__}",
            context={"value": repr(value)},
            fix_hint="Series hold float, int, bool or str values",
        )

    @classmethod
    def infer(cls, values: Iterable[Any]) -> ColumnKind:
        """Infer the kind of a column from its present values.

        Integers mixed with floats widen to ``float``. A column without
        present values is ``float``.
        """
        kinds = {cls.of(v) for v in values if v is not None}
        if not kinds:
            return cls.FLOAT
        if len(kinds) == 1:
            return kinds.pop()
        if kinds == {cls.INT, cls.FLOAT}:
            return cls.FLOAT
        raise EContractViolation(
            "Mixed element types in one series",
            context={"kinds": sorted(k.value for k in kinds)},
        )

    @classmethod
    def from_type(cls, kind: ColumnKind | str | type) -> ColumnKind:
        """Resolve a ColumnKind, its string value, or a Python type."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, type):
            for member, py_type in _PYTHON_TYPES.items():
                if kind is py_type:
                    return member
            raise EContractViolation(f"Unsupported column type: {kind.__name__}")
        return cls(kind)


_PYTHON_TYPES: dict[ColumnKind, type] = {
    ColumnKind.FLOAT: float,
    ColumnKind.INT: int,
    ColumnKind.BOOL: bool,
    ColumnKind.STR: str,
}


__all__ = [
    "IndexOrder",
    "EstimationMethod",
    "ColumnKind",
]
