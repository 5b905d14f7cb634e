"""Recommendations prompt generator - Generates improvement request prompts."""

from tablequality.models.report import AnalysisReport
from tablequality.profiling.values import format_number

RECOMMENDATIONS_SYSTEM_PROMPT = (
    "You are a data quality expert. Provide 3-5 specific, actionable "
    "recommendations to improve the dataset. Format as a JSON array with objects "
    "containing 'priority' (high/medium/low), 'action', and 'benefit' fields."
)

PRIMARY_ISSUE_LIMIT = 5


def generate_recommendations_prompt(report: AnalysisReport) -> str:
    """Generate the user prompt asking for JSON-formatted recommendations."""
    messages = [
        issue.message
        for profile in report.column_analysis.values()
        for issue in profile.issues
    ][:PRIMARY_ISSUE_LIMIT]

    return f"""
Dataset Issues Summary:
- Quality Score: {format_number(report.metrics.overall_quality)}/100
- Primary Issues: {"; ".join(messages)}

Based on these data quality issues, provide 3-5 specific, actionable recommendations in JSON format:
[
  {{"priority": "high", "action": "...", "benefit": "..."}},
  ...
]
"""
