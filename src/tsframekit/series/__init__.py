"""Series module for tsframekit.

Provides ordered series, frames of aligned series and timestamp views.
"""

from .data_frame import DataFrame
from .data_series import DataSeries, Present
from .gaps import GapClass, GapProfile, compute_frame_gap_profile, compute_gap_profile
from .interpolation import interp1
from .time_series import TimePresent, TimeSeries

__all__ = [
    # Containers
    "DataSeries",
    "DataFrame",
    "TimeSeries",
    "Present",
    "TimePresent",
    # Estimation
    "interp1",
    # Gaps
    "GapProfile",
    "GapClass",
    "compute_gap_profile",
    "compute_frame_gap_profile",
]
