"""Configuration shared by series, frames and time series.

Each container carries its own config instance, there is no
process-wide default that can be mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tsframekit.core.types import EstimationMethod

MIN_COLUMN_WIDTH = 5


@dataclass(frozen=True)
class SeriesConfig:
    """Defaults for estimation, verification and rendering.

    Args:
        method: Estimation method used when a call does not pass one
        verify: Whether inserts reject duplicates in unique orders
        max_column_width: Render width limit per column (None for unlimited)
        time_format: strftime pattern for rendering TimeSeries indexes
    """

    method: EstimationMethod = EstimationMethod.NEARLIN
    verify: bool = True
    max_column_width: int | None = None
    time_format: str = "%Y-%m-%d %H:%M:%S"

    def __post_init__(self) -> None:
        # Accept plain strings for the method
        object.__setattr__(self, "method", EstimationMethod(self.method))
        if self.max_column_width is not None and self.max_column_width < 1:
            raise ValueError(f"max_column_width must be positive, got {self.max_column_width}")
        if not self.time_format:
            raise ValueError("time_format must not be empty")

    @classmethod
    def strict(cls) -> SeriesConfig:
        """Nearest-neighbour estimation only, duplicates always rejected."""
        return cls(method=EstimationMethod.NEAREST, verify=True)

    @classmethod
    def lenient(cls) -> SeriesConfig:
        """Admit duplicate indexes by downgrading the series order."""
        return cls(verify=False)

    def with_overrides(self, **changes: object) -> SeriesConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def column_width(self) -> int | None:
        """Effective render width, never below MIN_COLUMN_WIDTH."""
        if self.max_column_width is None:
            return None
        return max(self.max_column_width, MIN_COLUMN_WIDTH)


DEFAULT_CONFIG = SeriesConfig()
