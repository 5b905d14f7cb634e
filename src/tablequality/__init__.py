"""Data quality profiling and scoring for tabular datasets."""

from tablequality.analyzer import (
    analyze,
    analyze_data_quality,
    generate_data_type_distribution,
)
from tablequality.config import AnalysisConfig, load_config_from_yaml, save_config_to_yaml
from tablequality.models import (
    AnalysisFailure,
    AnalysisReport,
    ColumnProfile,
    Issue,
    IssueKind,
    Priority,
    QualityMetrics,
    QualityTrend,
    Recommendation,
    Severity,
    SqlRecommendation,
)
from tablequality.profiling import (
    ColumnProfiler,
    InferredType,
    OutlierResult,
    detect_outliers,
    infer_data_type,
    profile_column,
)
from tablequality.prompts import (
    extract_recommendations,
    generate_fallback_insights,
    generate_fallback_recommendations,
    generate_insights_prompt,
    generate_recommendations_prompt,
)
from tablequality.recommendations import (
    generate_recommendations,
    generate_sql_recommendations,
)
from tablequality.report_validator import ReportValidationError, ReportValidator
from tablequality.scoring import (
    calculate_quality_metrics,
    calculate_quality_trend,
    quality_label,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "AnalysisFailure",
    "AnalysisReport",
    "ColumnProfile",
    "ColumnProfiler",
    "InferredType",
    "Issue",
    "IssueKind",
    "OutlierResult",
    "Priority",
    "QualityMetrics",
    "QualityTrend",
    "Recommendation",
    "ReportValidationError",
    "ReportValidator",
    "Severity",
    "SqlRecommendation",
    "analyze",
    "analyze_data_quality",
    "calculate_quality_metrics",
    "calculate_quality_trend",
    "detect_outliers",
    "extract_recommendations",
    "generate_data_type_distribution",
    "generate_fallback_insights",
    "generate_fallback_recommendations",
    "generate_insights_prompt",
    "generate_recommendations",
    "generate_recommendations_prompt",
    "generate_sql_recommendations",
    "infer_data_type",
    "load_config_from_yaml",
    "profile_column",
    "quality_label",
    "save_config_to_yaml",
]
