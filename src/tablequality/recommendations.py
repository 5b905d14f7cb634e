"""Generate improvement recommendations from column profiles."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tablequality.config import DEFAULT_CONFIG, AnalysisConfig
from tablequality.models.report import (
    AnalysisReport,
    ColumnProfile,
    InferredType,
    IssueKind,
    Priority,
    QualityMetrics,
    Recommendation,
    Severity,
    SqlRecommendation,
)

logger = logging.getLogger(__name__)

MISSING_DATA = "missing_data"
OVERALL_QUALITY = "overall_quality"


def generate_recommendations(
    column_analysis: Mapping[str, ColumnProfile],
    metrics: QualityMetrics,
    config: AnalysisConfig | None = None,
) -> list[Recommendation]:
    """Turn column issues and the overall score into recommendations.

    For each column, in column order: a missing-data recommendation when the
    null share is above the threshold, then one recommendation per issue. An
    overall-quality recommendation closes the list when the overall score is
    low. The list is truncated to ``max_recommendations``.

    Args:
    ----
        column_analysis: Column name to ColumnProfile
        metrics: Quality metrics for the dataset
        config: Analysis limits; defaults apply when omitted

    Returns:
    -------
        Ordered list of recommendations

    """
    config = config or DEFAULT_CONFIG
    recommendations: list[Recommendation] = []

    for profile in column_analysis.values():
        if profile.null_percentage > config.null_threshold:
            recommendations.append(
                Recommendation(
                    priority=Priority.HIGH,
                    category=MISSING_DATA,
                    column=profile.name,
                    suggestion=(
                        f'Address missing values in "{profile.name}" '
                        f"({profile.null_percentage:.2f}% missing). "
                        "Consider: removing rows, imputation, or validation."
                    ),
                    sql_hint=f"SELECT COUNT(*) FROM table WHERE {profile.name} IS NULL;",
                )
            )

        for issue in profile.issues:
            recommendations.append(
                Recommendation(
                    priority=(
                        Priority.HIGH
                        if issue.severity == Severity.ERROR
                        else Priority.MEDIUM
                    ),
                    category=issue.kind.value,
                    column=profile.name,
                    suggestion=issue.message,
                )
            )

    if metrics.overall_quality < config.overall_quality_threshold:
        recommendations.append(
            Recommendation(
                priority=Priority.HIGH,
                category=OVERALL_QUALITY,
                suggestion=(
                    "Overall data quality is below acceptable levels. "
                    "Consider: data validation, cleansing, and standardization."
                ),
            )
        )

    if len(recommendations) > config.max_recommendations:
        logger.debug(
            f"Truncating {len(recommendations)} recommendations "
            f"to {config.max_recommendations}"
        )
    return recommendations[: config.max_recommendations]


def generate_sql_recommendations(
    report: AnalysisReport,
    table_name: str = "table_name",
    config: AnalysisConfig | None = None,
) -> list[SqlRecommendation]:
    """Suggest SQL statements that help clean the profiled columns.

    Args:
    ----
        report: Completed analysis report
        table_name: Table name to use in the generated statements
        config: Analysis limits; defaults apply when omitted

    Returns:
    -------
        SQL recommendations in column order

    """
    config = config or DEFAULT_CONFIG
    recommendations: list[SqlRecommendation] = []

    for profile in report.column_analysis.values():
        column = profile.name

        if profile.null_percentage > config.null_threshold:
            recommendations.append(
                SqlRecommendation(
                    type="handle_nulls",
                    column=column,
                    sql=(
                        f"UPDATE {table_name} SET {column} = 'default_value' "
                        f"WHERE {column} IS NULL;"
                    ),
                    description=f"Replace NULL values in {column}",
                )
            )

        if profile.duplicate_count > 0:
            recommendations.append(
                SqlRecommendation(
                    type="remove_duplicates",
                    column=column,
                    sql=(
                        f"DELETE FROM {table_name} WHERE id NOT IN "
                        f"(SELECT MIN(id) FROM {table_name} GROUP BY {column});"
                    ),
                    description="Remove duplicate entries",
                )
            )

        if profile.inferred_type == InferredType.EMAIL and any(
            issue.kind == IssueKind.INVALID_EMAILS for issue in profile.issues
        ):
            recommendations.append(
                SqlRecommendation(
                    type="validate_format",
                    column=column,
                    sql=f"SELECT * FROM {table_name} WHERE {column} NOT LIKE '%@%.%';",
                    description=f"Identify invalid email formats in {column}",
                )
            )

    return recommendations
