"""Prompt generation utilities for explaining quality reports with an LLM."""

from .fallback import generate_fallback_insights, generate_fallback_recommendations
from .insights import INSIGHTS_SYSTEM_PROMPT, generate_insights_prompt
from .recommendations import (
    RECOMMENDATIONS_SYSTEM_PROMPT,
    generate_recommendations_prompt,
)
from .utils import extract_recommendations

__all__ = [
    "INSIGHTS_SYSTEM_PROMPT",
    "RECOMMENDATIONS_SYSTEM_PROMPT",
    "extract_recommendations",
    "generate_fallback_insights",
    "generate_fallback_recommendations",
    "generate_insights_prompt",
    "generate_recommendations_prompt",
]
