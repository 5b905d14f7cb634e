"""Quality scoring across columns.

Four dimensions are averaged over columns:

- completeness: share of non-null values
- consistency: penalised by the share of duplicate values
- accuracy: 20 points off per error-severity issue, floored at 0
- validity: 25 points off per error-severity issue

Consistency and validity are capped at 100 after averaging; completeness and
accuracy are reported as computed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import reduce
from typing import NamedTuple

from tablequality.models.report import ColumnProfile, QualityMetrics, QualityTrend
from tablequality.profiling.values import round_half_up, safe_divide

logger = logging.getLogger(__name__)


class DimensionTotals(NamedTuple):
    """Running per-dimension sums while folding over column profiles."""

    completeness: float = 0.0
    consistency: float = 0.0
    accuracy: float = 0.0
    validity: float = 0.0


def score_column(profile: ColumnProfile) -> DimensionTotals:
    """Score one column on the four quality dimensions."""
    errors = profile.error_count
    if profile.total_count:
        completeness = (1 - profile.null_count / profile.total_count) * 100
    else:
        completeness = 0.0
    duplicate_share = safe_divide(profile.duplicate_count, profile.total_count)
    return DimensionTotals(
        completeness=completeness,
        consistency=100 - abs(duplicate_share) * 50,
        accuracy=max(0, 100 - errors * 20),
        validity=100 - errors * 25,
    )


def _add(totals: DimensionTotals, profile: ColumnProfile) -> DimensionTotals:
    column = score_column(profile)
    return DimensionTotals(*(a + b for a, b in zip(totals, column, strict=True)))


def calculate_quality_metrics(
    column_analysis: Mapping[str, ColumnProfile],
) -> QualityMetrics:
    """Aggregate column profiles into quality metrics.

    Args:
    ----
        column_analysis: Column name to ColumnProfile

    Returns:
    -------
        QualityMetrics rounded to 2 decimals; all zeros when there are no columns

    """
    column_count = len(column_analysis)
    if column_count == 0:
        logger.debug("No columns to score, returning zero metrics")
        return QualityMetrics(
            completeness=0.0,
            consistency=0.0,
            accuracy=0.0,
            validity=0.0,
            overall_quality=0.0,
        )

    totals = reduce(_add, column_analysis.values(), DimensionTotals())

    completeness = round_half_up(totals.completeness / column_count)
    consistency = min(100.0, round_half_up(totals.consistency / column_count))
    accuracy = round_half_up(totals.accuracy / column_count)
    validity = min(100.0, round_half_up(totals.validity / column_count))
    overall = round_half_up((completeness + consistency + accuracy + validity) / 4)

    return QualityMetrics(
        completeness=completeness,
        consistency=consistency,
        accuracy=accuracy,
        validity=validity,
        overall_quality=overall,
    )


def quality_label(score: float) -> str:
    """Describe an overall quality score in words."""
    if score >= 90:
        return "Excellent"
    if score >= 70:
        return "Good"
    if score >= 50:
        return "Fair"
    return "Poor"


def calculate_quality_trend(
    previous: QualityMetrics | None, current: QualityMetrics
) -> QualityTrend:
    """Compare overall quality against a previous analysis.

    Args:
    ----
        previous: Metrics of the earlier analysis, or None for a first run
        current: Metrics of the latest analysis

    Returns:
    -------
        QualityTrend with direction and change in points and percent

    """
    if previous is None:
        return QualityTrend(trend="initial", change=0.0)

    change = current.overall_quality - previous.overall_quality
    if change > 0:
        trend = "improving"
    elif change < 0:
        trend = "declining"
    else:
        trend = "stable"

    percent_change = safe_divide(change, previous.overall_quality) * 100
    return QualityTrend(
        trend=trend,
        change=round_half_up(change),
        percent_change=round_half_up(percent_change),
    )
