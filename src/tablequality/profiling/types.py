"""Profiling data types for column analysis."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OutlierBounds:
    """Inclusive range outside of which a value counts as an outlier."""

    lower: float
    upper: float


@dataclass(frozen=True)
class OutlierResult:
    """Result of an interquartile-range outlier scan."""

    count: int
    values: list[float] = field(default_factory=list)
    bounds: OutlierBounds | None = None


@dataclass(frozen=True)
class NumericSummary:
    """Descriptive statistics for the parseable values of a numeric column."""

    minimum: float | None
    maximum: float | None
    mean: float | None
    median: float | None
    unparseable_count: int = 0
