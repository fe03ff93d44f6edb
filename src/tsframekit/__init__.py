"""tsframekit - Multi-key dictionaries and gap-aware ordered series.

Two in-process building blocks:

* ``MultiMap`` - a dictionary keyed by a fixed-length tuple of comparable
  keys, backed by a ternary search trie, with ``None`` as a wildcard in
  lookups.
* ``DataSeries`` / ``DataFrame`` / ``TimeSeries`` - sparse, ordered,
  numerically indexed columns with nearest and near-linear estimation,
  gap filling and resampling.

Basic usage:
    >>> from tsframekit import MultiMap
    >>> people = MultiMap(arity=2)
    >>> people.insert(123, ("Bob", "Smith"))
    >>> people.find((None, "Smith"))
    [123]

    >>> from tsframekit import DataFrame, DataSeries
    >>> df = DataFrame(DataSeries([1.0, None, 3.0], name="a"))
    >>> df.fill(method="nearlin")
    >>> df.get("a", float).data
    [1.0, 2.0, 3.0]

Error tiers:
    Structural misuse (wrong key arity, an index that breaks its declared
    order, unsupported estimation methods) raises a ``TSFrameKitError``
    subclass. Expected runtime outcomes (a refused append, a column read
    under the wrong kind) are reported through False/None returns.
"""

__version__ = "0.3.0"

# Core API
from tsframekit.core.config import DEFAULT_CONFIG, SeriesConfig
from tsframekit.core.errors import (
    EContractViolation,
    EEmptySeries,
    EUnsupportedMethod,
    TSFrameKitError,
)
from tsframekit.core.types import ColumnKind, EstimationMethod, IndexOrder

# Discovery
from tsframekit.discovery import describe

# Series
from tsframekit.series import (
    DataFrame,
    DataSeries,
    GapClass,
    GapProfile,
    Present,
    TimePresent,
    TimeSeries,
    compute_frame_gap_profile,
    compute_gap_profile,
    interp1,
)

# Trie
from tsframekit.trie import MultikeyDictionary, MultiMap

__all__ = [
    "__version__",
    # Trie
    "MultiMap",
    "MultikeyDictionary",
    # Series
    "DataSeries",
    "DataFrame",
    "TimeSeries",
    "Present",
    "TimePresent",
    "interp1",
    # Gaps
    "GapProfile",
    "GapClass",
    "compute_gap_profile",
    "compute_frame_gap_profile",
    # Config and types
    "SeriesConfig",
    "DEFAULT_CONFIG",
    "IndexOrder",
    "EstimationMethod",
    "ColumnKind",
    # Errors
    "TSFrameKitError",
    "EContractViolation",
    "EUnsupportedMethod",
    "EEmptySeries",
    # Discovery
    "describe",
]
