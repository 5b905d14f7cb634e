"""Report Pydantic Models

Type-safe models for data quality reports. Python attributes are snake_case;
serialized payloads use the camelCase field names that downstream consumers
(insight generation, export formatting) read.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InferredType(StrEnum):
    """Semantic type assigned to a column by the type classifier."""

    EMAIL = "email"
    BOOLEAN = "boolean"
    DATE = "date"
    NUMERIC = "numeric"
    URL = "url"
    TEXT = "text"
    UNKNOWN = "unknown"


class Severity(StrEnum):
    """Issue severity."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(StrEnum):
    """Kinds of column issue detected by the profiler."""

    HIGH_NULL_VALUES = "high_null_values"
    OUTLIERS_DETECTED = "outliers_detected"
    INVALID_EMAILS = "invalid_emails"
    UNPARSEABLE_NUMERIC_VALUES = "unparseable_numeric_values"


class Priority(StrEnum):
    """Recommendation priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ReportModel(BaseModel):
    """Base for report models: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class Issue(ReportModel):
    """A severity-tagged finding attached to a column profile."""

    kind: IssueKind = Field(description="Issue kind")
    severity: Severity = Field(description="Issue severity")
    message: str = Field(description="Human-readable message including the statistic")
    count: int | None = Field(default=None, ge=0, description="Affected value count")


class ColumnProfile(ReportModel):
    """Computed statistics and issues for one column."""

    name: str = Field(description="Column name")
    total_count: int = Field(ge=0, description="Row count")
    null_count: int = Field(ge=0, description="Null-like value count")
    null_percentage: float = Field(ge=0.0, le=100.0, description="Null share, 2 decimals")
    unique_count: int = Field(ge=0, description="Distinct non-null values")
    unique_percentage: float = Field(ge=0.0, description="Distinct share, 2 decimals")
    duplicate_count: int = Field(ge=0, description="total_count - unique_count")
    inferred_type: InferredType = Field(description="Inferred semantic type")
    sample_values: list[Any] = Field(
        default_factory=list, description="First non-null values in row order"
    )
    minimum: float | None = Field(default=None, alias="min")
    maximum: float | None = Field(default=None, alias="max")
    mean: float | None = Field(default=None)
    median: float | None = Field(default=None)
    issues: list[Issue] = Field(default_factory=list)

    @property
    def non_null_count(self) -> int:
        """Number of values that are not null-like."""
        return self.total_count - self.null_count

    @property
    def error_count(self) -> int:
        """Number of error-severity issues."""
        return sum(1 for issue in self.issues if issue.severity == Severity.ERROR)


class QualityMetrics(ReportModel):
    """Aggregate quality dimensions, each nominally 0-100."""

    completeness: float
    consistency: float
    accuracy: float
    validity: float
    overall_quality: float


class Recommendation(ReportModel):
    """A prioritized, human-readable improvement suggestion."""

    priority: Priority
    category: str
    column: str | None = None
    suggestion: str
    sql_hint: str | None = None


class AnalysisReport(ReportModel):
    """Root output of a data quality analysis."""

    file_name: str
    row_count: int = Field(ge=0)
    column_count: int = Field(ge=0)
    columns: list[str]
    preview: list[dict[str, Any]] = Field(alias="data")
    column_analysis: dict[str, ColumnProfile]
    metrics: QualityMetrics
    recommendations: list[Recommendation]
    quality_score: int
    data_types: dict[str, InferredType]

    @property
    def issue_count(self) -> int:
        """Total number of issues across all columns."""
        return sum(len(profile.issues) for profile in self.column_analysis.values())


class AnalysisFailure(ReportModel):
    """Degraded result returned when a dataset fails validation."""

    error: str
    file_name: str
    row_count: int = 0
    column_count: int = 0


class QualityTrend(ReportModel):
    """Change in overall quality between two analyses of the same source."""

    trend: str = Field(pattern=r"^(initial|improving|declining|stable)$")
    change: float = 0.0
    percent_change: float | None = None


class SqlRecommendation(ReportModel):
    """A SQL statement template that helps clean one column."""

    type: str = Field(pattern=r"^(handle_nulls|remove_duplicates|validate_format)$")
    column: str
    sql: str
    description: str
