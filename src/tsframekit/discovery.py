"""API discovery and introspection for tsframekit.

Provides ``describe()`` which returns a machine-readable schema of
the library's public surface: version, stable APIs, error codes with
fix hints, index orders and estimation methods.

Usage:
    >>> from tsframekit import describe
    >>> info = describe()
    >>> info["estimation_methods"]["nearlin"]
    True
"""

from __future__ import annotations

from typing import Any


def describe() -> dict[str, Any]:
    """Return a machine-readable API schema for tsframekit.

    Returns a dictionary with:
      - ``version``: library version string
      - ``apis``: mapping of task names to primary API entry points
      - ``error_codes``: mapping of error codes to class/description/fix_hint
      - ``index_orders``: mapping of order name to sorted/unique flags
      - ``estimation_methods``: mapping of method name to implemented flag
      - ``column_kinds``: supported series element kinds

    Returns:
        Structured dict describing the full public surface.
    """
    import tsframekit

    return {
        "version": tsframekit.__version__,
        "apis": _get_apis(),
        "error_codes": _get_error_codes(),
        "index_orders": _get_index_orders(),
        "estimation_methods": _get_estimation_methods(),
        "column_kinds": _get_column_kinds(),
    }


def _get_apis() -> dict[str, dict[str, str]]:
    """Return stable API surface."""
    return {
        "multikey_lookup": {
            "function": "MultiMap.find",
            "description": "Look up values by key tuple, None keys are wildcards",
        },
        "series": {
            "function": "DataSeries",
            "description": "Ordered sparse column with a numeric index",
        },
        "query": {
            "function": "DataSeries.query / DataSeries.query_many",
            "description": "Estimate values at arbitrary indexes",
        },
        "fill": {
            "function": "DataSeries.fill / DataFrame.fill",
            "description": "Replace gaps with estimates from present values",
        },
        "resample": {
            "function": "DataSeries.resample",
            "description": "Sample a series on a fixed cadence",
        },
        "compare": {
            "function": "DataSeries.minus / mse / rms",
            "description": "Difference two series on this series' index",
        },
        "frame": {
            "function": "DataFrame.assign",
            "description": "Collect named series aligned on their union index",
        },
        "time_series": {
            "function": "TimeSeries",
            "description": "Timestamp-indexed view over a DataSeries",
        },
        "gap_profile": {
            "function": "compute_gap_profile",
            "description": "Summarize missing values of a series",
        },
    }


def _get_error_codes() -> dict[str, dict[str, str]]:
    """Return all error codes with descriptions and fix hints."""
    from tsframekit.core.errors import ERROR_REGISTRY

    result: dict[str, dict[str, str]] = {}
    for code, cls in ERROR_REGISTRY.items():
        result[code] = {
            "class": cls.__name__,
            "description": cls.__doc__ or "",
            "fix_hint": cls.fix_hint,
        }
    return result


def _get_index_orders() -> dict[str, dict[str, bool]]:
    from tsframekit.core.types import IndexOrder

    return {
        order.value: {"sorted": order.is_sorted, "unique": order.is_unique}
        for order in IndexOrder
    }


def _get_estimation_methods() -> dict[str, bool]:
    from tsframekit.core.types import EstimationMethod

    return {method.value: method.is_implemented for method in EstimationMethod}


def _get_column_kinds() -> list[str]:
    from tsframekit.core.types import ColumnKind

    return [kind.value for kind in ColumnKind]


__all__ = ["describe"]
