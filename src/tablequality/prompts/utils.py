"""Shared utilities for prompt handling."""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")


def extract_recommendations(content: str) -> list[dict[str, Any]]:
    """Extract the JSON array of recommendations from a model response.

    Models often wrap the array in prose or code fences; everything from the
    first ``[`` to the last ``]`` is parsed. Returns an empty list when no
    array of objects can be recovered.
    """
    match = _JSON_ARRAY.search(content or "")
    if not match:
        return []
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        logger.warning("Model response contained a malformed JSON array")
        return []
    if not isinstance(parsed, list):
        return []
    return [item for item in parsed if isinstance(item, dict)]
