"""Core module - errors, configuration and shared enumerations.

This module provides the foundational types used by the trie and the
series containers.
"""

from tsframekit.core.config import DEFAULT_CONFIG, SeriesConfig
from tsframekit.core.errors import (
    EContractViolation,
    EEmptySeries,
    EUnsupportedMethod,
    TSFrameKitError,
)
from tsframekit.core.types import ColumnKind, EstimationMethod, IndexOrder

__all__ = [
    # Config
    "SeriesConfig",
    "DEFAULT_CONFIG",
    # Types
    "IndexOrder",
    "EstimationMethod",
    "ColumnKind",
    # Errors
    "TSFrameKitError",
    "EContractViolation",
    "EUnsupportedMethod",
    "EEmptySeries",
]
