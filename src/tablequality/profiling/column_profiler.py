"""Per-column statistics and issue detection."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from tablequality.config import DEFAULT_CONFIG, AnalysisConfig
from tablequality.models.report import (
    ColumnProfile,
    InferredType,
    Issue,
    IssueKind,
    Severity,
)
from tablequality.profiling.outliers import detect_outliers
from tablequality.profiling.type_inference import infer_data_type, is_valid_email
from tablequality.profiling.types import NumericSummary
from tablequality.profiling.values import (
    distinct_key,
    is_null_like,
    parse_number,
    round_half_up,
    safe_divide,
)


def column_values(data: Sequence[Mapping[str, Any]], column: str) -> list[Any]:
    """Collect one column's values in row order; missing keys read as None."""
    return [row.get(column) for row in data]


def summarize_numeric(values: Sequence[Any]) -> NumericSummary:
    """Compute min, max, mean and median over the parseable values.

    Null-like values are ignored. Values that do not parse as numbers are
    skipped and counted in ``unparseable_count``.
    """
    numbers: list[float] = []
    unparseable = 0
    for value in values:
        if is_null_like(value):
            continue
        number = parse_number(value)
        if number is None:
            unparseable += 1
        else:
            numbers.append(number)

    if not numbers:
        return NumericSummary(None, None, None, None, unparseable_count=unparseable)

    return NumericSummary(
        minimum=round_half_up(min(numbers)),
        maximum=round_half_up(max(numbers)),
        mean=round_half_up(sum(numbers) / len(numbers)),
        median=round_half_up(calculate_median(numbers)),
        unparseable_count=unparseable,
    )


def calculate_median(values: Sequence[float]) -> float:
    """Middle value, or the average of the two middle values for even lengths."""
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) / 2


class ColumnProfiler:
    """Builds ColumnProfile objects for dataset columns."""

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        """Initialize profiler.

        Args:
        ----
            config: Analysis limits; defaults apply when omitted

        """
        self.config = config or DEFAULT_CONFIG
        self.logger = logging.getLogger(self.__class__.__name__)

    def profile(
        self, data: Sequence[Mapping[str, Any]], column: str
    ) -> ColumnProfile:
        """Profile one column of a dataset."""
        return self.profile_values(column, column_values(data, column))

    def profile_values(
        self,
        name: str,
        values: Sequence[Any],
        inferred_type: InferredType | None = None,
    ) -> ColumnProfile:
        """Profile a column from its raw values.

        Args:
        ----
            name: Column name
            values: All raw values in row order, nulls included
            inferred_type: Force a type instead of running inference

        Returns:
        -------
            ColumnProfile with statistics and detected issues

        """
        total = len(values)
        present = [v for v in values if not is_null_like(v)]
        null_count = total - len(present)
        unique_count = len({distinct_key(v) for v in present})

        if inferred_type is None:
            inferred_type = infer_data_type(values)

        null_percentage = round_half_up(safe_divide(null_count, total) * 100)
        issues: list[Issue] = []

        if null_percentage > self.config.null_threshold:
            issues.append(
                Issue(
                    kind=IssueKind.HIGH_NULL_VALUES,
                    severity=Severity.WARNING,
                    message=f"{null_percentage:.2f}% of values are missing",
                    count=null_count,
                )
            )

        stats: dict[str, float | None] = {}
        if inferred_type == InferredType.NUMERIC:
            summary = summarize_numeric(values)
            stats = {
                "minimum": summary.minimum,
                "maximum": summary.maximum,
                "mean": summary.mean,
                "median": summary.median,
            }
            issues.extend(self._numeric_issues(name, values, summary))
        elif inferred_type == InferredType.EMAIL:
            issues.extend(self._email_issues(present))

        profile = ColumnProfile(
            name=name,
            total_count=total,
            null_count=null_count,
            null_percentage=null_percentage,
            unique_count=unique_count,
            unique_percentage=round_half_up(safe_divide(unique_count, total) * 100),
            duplicate_count=total - unique_count,
            inferred_type=inferred_type,
            sample_values=present[: self.config.sample_size],
            issues=issues,
            **stats,
        )
        self.logger.debug(
            f"Column {name}: type={inferred_type}, nulls={null_count}/{total}, "
            f"unique={unique_count}, issues={len(issues)}"
        )
        return profile

    def _numeric_issues(
        self, name: str, values: Sequence[Any], summary: NumericSummary
    ) -> list[Issue]:
        issues: list[Issue] = []

        if summary.unparseable_count:
            self.logger.warning(
                f"Column {name}: skipped {summary.unparseable_count} "
                "non-numeric values in numeric statistics"
            )
            issues.append(
                Issue(
                    kind=IssueKind.UNPARSEABLE_NUMERIC_VALUES,
                    severity=Severity.WARNING,
                    message=(
                        f"{summary.unparseable_count} non-numeric values "
                        "excluded from statistics"
                    ),
                    count=summary.unparseable_count,
                )
            )

        numbers = [
            n
            for n in (parse_number(v) for v in values if not is_null_like(v))
            if n is not None
        ]
        outliers = detect_outliers(
            numbers,
            multiplier=self.config.outlier_multiplier,
            min_values=self.config.min_outlier_values,
        )
        if outliers.count > 0:
            issues.append(
                Issue(
                    kind=IssueKind.OUTLIERS_DETECTED,
                    severity=Severity.INFO,
                    message=f"{outliers.count} potential outliers detected",
                    count=outliers.count,
                )
            )
        return issues

    def _email_issues(self, present: Sequence[Any]) -> list[Issue]:
        invalid = sum(1 for v in present if not is_valid_email(v))
        if not invalid:
            return []
        return [
            Issue(
                kind=IssueKind.INVALID_EMAILS,
                severity=Severity.ERROR,
                message=f"{invalid} invalid email addresses detected",
                count=invalid,
            )
        ]


def profile_column(
    name: str,
    values: Sequence[Any],
    inferred_type: InferredType | None = None,
    config: AnalysisConfig | None = None,
) -> ColumnProfile:
    """Profile a single column from its raw values."""
    return ColumnProfiler(config).profile_values(name, values, inferred_type)
