"""Insights prompt generator - Generates quality explanation prompts."""

from tablequality.models.report import AnalysisReport
from tablequality.profiling.values import format_number
from tablequality.scoring import quality_label

INSIGHTS_SYSTEM_PROMPT = (
    "You are a data quality expert. Analyze the data quality metrics and provide "
    "clear, actionable insights for non-technical users. Focus on: 1) What the "
    "metrics mean, 2) What issues exist, 3) How to improve. Keep response under "
    "300 words."
)

# Issue lines are clipped so a wide table cannot crowd out the metrics.
TOP_ISSUES_MAX_CHARS = 200


def generate_insights_prompt(report: AnalysisReport) -> str:
    """Generate the user prompt asking for an explanation of a report."""
    metrics = report.metrics
    overall = metrics.overall_quality

    issue_lines = [
        f"- {profile.name}: {issue.message}"
        for profile in report.column_analysis.values()
        for issue in profile.issues[:2]
    ]
    top_issues = "\n".join(issue_lines)[:TOP_ISSUES_MAX_CHARS]

    return f"""
Dataset: {report.file_name}
Rows: {report.row_count}
Columns: {len(report.column_analysis)}

Quality Metrics:
- Overall Quality Score: {format_number(overall)}/100 ({quality_label(overall)})
- Completeness: {format_number(metrics.completeness)}/100
- Consistency: {format_number(metrics.consistency)}/100
- Accuracy: {format_number(metrics.accuracy)}/100
- Validity: {format_number(metrics.validity)}/100

Issues Found: {report.issue_count}

Top Issues:
{top_issues}

Please provide a brief analysis explaining these metrics and suggest top 3 improvements.
"""
