"""Report data models for tablequality."""

from tablequality.models.report import (
    AnalysisFailure,
    AnalysisReport,
    ColumnProfile,
    InferredType,
    Issue,
    IssueKind,
    Priority,
    QualityMetrics,
    QualityTrend,
    Recommendation,
    Severity,
    SqlRecommendation,
)

__all__ = [
    "AnalysisFailure",
    "AnalysisReport",
    "ColumnProfile",
    "InferredType",
    "Issue",
    "IssueKind",
    "Priority",
    "QualityMetrics",
    "QualityTrend",
    "Recommendation",
    "Severity",
    "SqlRecommendation",
]
