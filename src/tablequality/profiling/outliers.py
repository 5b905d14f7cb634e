"""Interquartile-range outlier detection."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from tablequality.profiling.types import OutlierBounds, OutlierResult

logger = logging.getLogger(__name__)

MIN_OUTLIER_VALUES = 4
IQR_MULTIPLIER = 1.5


def detect_outliers(
    values: Sequence[float],
    multiplier: float = IQR_MULTIPLIER,
    min_values: int = MIN_OUTLIER_VALUES,
) -> OutlierResult:
    """Flag values outside ``[Q1 - k*IQR, Q3 + k*IQR]``.

    Quartiles are positional, not interpolated: Q1 is the sorted value at index
    ``floor(n * 0.25)`` and Q3 the one at ``floor(n * 0.75)``. Values exactly on
    a bound are not outliers. The input is left untouched.

    Args:
    ----
        values: Parsed numeric values
        multiplier: IQR multiplier (1.5 for the classic Tukey fences)
        min_values: Lists shorter than this report no outliers

    Returns:
    -------
        OutlierResult with the count, the outlying values in input order and
        the bounds used

    """
    if len(values) < min_values:
        return OutlierResult(count=0)

    ordered = sorted(values)
    n = len(ordered)
    q1 = ordered[math.floor(n * 0.25)]
    q3 = ordered[math.floor(n * 0.75)]
    iqr = q3 - q1
    bounds = OutlierBounds(lower=q1 - multiplier * iqr, upper=q3 + multiplier * iqr)

    outliers = [v for v in values if v < bounds.lower or v > bounds.upper]
    logger.debug(
        f"IQR scan over {n} values: bounds=({bounds.lower}, {bounds.upper}), "
        f"outliers={len(outliers)}"
    )
    return OutlierResult(count=len(outliers), values=outliers, bounds=bounds)
