"""Offline insight text used when no text-generation service is configured."""

from typing import Any

from tablequality.models.report import AnalysisReport

_ASSESSMENTS = (
    (90, "Your data quality is excellent! The dataset is well-maintained with minimal issues."),
    (
        70,
        "Your data quality is good, but there are some areas for improvement. "
        "Consider addressing the identified issues to enhance reliability.",
    ),
    (
        50,
        "Your data quality needs attention. There are several issues that should "
        "be addressed before using this data for critical decisions.",
    ),
)
_POOR_ASSESSMENT = (
    "Your data quality is poor. Significant data cleaning and validation work is "
    "recommended."
)

DEFAULT_RECOMMENDATIONS: tuple[dict[str, str], ...] = (
    {
        "priority": "high",
        "action": "Review columns with high null values and decide on a handling strategy",
        "benefit": "Improve data completeness",
    },
    {
        "priority": "medium",
        "action": "Standardize data formats across all columns",
        "benefit": "Enhance data consistency",
    },
    {
        "priority": "medium",
        "action": "Validate data against business rules",
        "benefit": "Ensure data accuracy",
    },
)


def generate_fallback_insights(report: AnalysisReport) -> str:
    """Summarize a report in plain language without a language model."""
    metrics = report.metrics
    quality = metrics.overall_quality

    assessment = next(
        (text for threshold, text in _ASSESSMENTS if quality >= threshold),
        _POOR_ASSESSMENT,
    )

    lines = [
        f"Your dataset has an overall quality score of {quality:.0f}/100.",
        "",
        assessment,
        "",
        "Key Findings:",
        f"• Completeness: {metrics.completeness:.0f}% - How much data is present",
        f"• Consistency: {metrics.consistency:.0f}% - Data uniformity",
        f"• Accuracy: {metrics.accuracy:.0f}% - Data correctness",
        f"• Validity: {metrics.validity:.0f}% - Data format validity",
    ]
    return "\n".join(lines)


def generate_fallback_recommendations(report: AnalysisReport) -> list[dict[str, Any]]:
    """Convert report recommendations to the action/benefit shape.

    Falls back to generic advice when the report has no recommendations.
    """
    recommendations = [
        {
            "priority": str(rec.priority),
            "action": rec.suggestion,
            "benefit": f"Improve {rec.category or 'data quality'}",
        }
        for rec in report.recommendations
    ]
    if not recommendations:
        recommendations = [dict(rec) for rec in DEFAULT_RECOMMENDATIONS]
    return recommendations
