"""Data quality analysis entry point.

``analyze_data_quality`` profiles every column of an in-memory dataset, scores
the result and attaches recommendations. It never raises for a bad dataset:
callers check for an ``AnalysisFailure`` instead.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any

from tablequality.config import DEFAULT_CONFIG, AnalysisConfig
from tablequality.models.report import AnalysisFailure, AnalysisReport
from tablequality.profiling.column_profiler import ColumnProfiler
from tablequality.profiling.values import round_score
from tablequality.recommendations import generate_recommendations
from tablequality.scoring import calculate_quality_metrics

logger = logging.getLogger(__name__)

INVALID_DATASET_ERROR = "Invalid or empty dataset"


def _is_record_sequence(data: Any) -> bool:
    if data is None or isinstance(data, (str, bytes, bytearray, Mapping)):
        return False
    if not isinstance(data, Sequence) or len(data) == 0:
        return False
    return all(
        isinstance(row, Mapping) and all(isinstance(key, str) for key in row)
        for row in data
    )


def analyze_data_quality(
    data: Sequence[Mapping[str, Any]] | None,
    file_name: str,
    config: AnalysisConfig | None = None,
) -> AnalysisReport | AnalysisFailure:
    """Analyze the quality of a tabular dataset.

    Columns are taken from the first record, in key order. Later records that
    lack a column are treated as holding a null for it.

    Args:
    ----
        data: Sequence of records mapping column name to raw value
        file_name: Label echoed in the report; not interpreted
        config: Analysis limits; defaults apply when omitted

    Returns:
    -------
        AnalysisReport, or AnalysisFailure when the dataset is missing, not a
        sequence of records, or empty

    """
    if not _is_record_sequence(data):
        logger.warning(f"Rejected dataset for {file_name!r}: {INVALID_DATASET_ERROR}")
        return AnalysisFailure(error=INVALID_DATASET_ERROR, file_name=file_name)

    config = config or DEFAULT_CONFIG
    columns = list(data[0].keys())
    profiler = ColumnProfiler(config)

    column_analysis = {column: profiler.profile(data, column) for column in columns}
    metrics = calculate_quality_metrics(column_analysis)
    recommendations = generate_recommendations(column_analysis, metrics, config)

    report = AnalysisReport(
        file_name=file_name,
        row_count=len(data),
        column_count=len(columns),
        columns=columns,
        preview=[dict(row) for row in data[: config.preview_rows]],
        column_analysis=column_analysis,
        metrics=metrics,
        recommendations=recommendations,
        quality_score=round_score(metrics.overall_quality),
        data_types={
            column: profile.inferred_type for column, profile in column_analysis.items()
        },
    )
    logger.info(
        f"Analyzed {file_name!r}: {report.row_count} rows, "
        f"{report.column_count} columns, quality score {report.quality_score}"
    )
    return report


analyze = analyze_data_quality


def generate_data_type_distribution(data_types: Mapping[str, str]) -> dict[str, int]:
    """Count columns per inferred type.

    Args:
    ----
        data_types: Column name to inferred type

    Returns:
    -------
        Inferred type to number of columns, in first-seen order

    """
    return dict(Counter(str(t) for t in data_types.values()))
