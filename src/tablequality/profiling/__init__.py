"""Column profiling: type inference, outlier detection and per-column statistics."""

from tablequality.models.report import InferredType
from tablequality.profiling.column_profiler import ColumnProfiler, profile_column
from tablequality.profiling.outliers import detect_outliers
from tablequality.profiling.type_inference import infer_data_type
from tablequality.profiling.types import (
    NumericSummary,
    OutlierBounds,
    OutlierResult,
)

__all__ = [
    "ColumnProfiler",
    "InferredType",
    "NumericSummary",
    "OutlierBounds",
    "OutlierResult",
    "detect_outliers",
    "infer_data_type",
    "profile_column",
]
