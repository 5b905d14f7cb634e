"""Semantic type inference for column values."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from dateutil import parser as dateparser

from tablequality.models.report import InferredType
from tablequality.profiling.values import (
    is_canonical_number,
    is_null_like,
    parse_number,
    to_text,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
BOOLEAN_LITERALS = frozenset({"true", "false", "1", "0", "yes", "no"})

# Two fixed anchors that differ in year, month and day. A field that comes out
# the same under both was read from the text; inference never depends on today.
_DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 2, 2))
# Field sets that make a calendar date: "May" or "10:30" alone do not.
CALENDAR_FIELD_SETS = (frozenset({"month", "day"}), frozenset({"year", "month"}))


def is_valid_email(value: Any) -> bool:
    """Check the value's text form against the email pattern."""
    return EMAIL_PATTERN.match(to_text(value)) is not None


def is_boolean_like(value: Any) -> bool:
    """Check whether the value reads as a boolean literal."""
    return to_text(value).lower() in BOOLEAN_LITERALS


def _parsed_date_fields(value: str) -> set[str]:
    first, second = (dateparser.parse(value, default=d) for d in _DATE_DEFAULTS)
    return {
        field
        for field in ("year", "month", "day")
        if getattr(first, field) == getattr(second, field)
    }


def is_valid_date(value: Any) -> bool:
    """Check whether a string parses as a calendar date or timestamp.

    Only strings are considered; bare numbers such as ``"12"`` are left for the
    numeric check rather than being read as a day of the month. The text must
    name a month together with a day or a year, so weekday names, month names,
    ordinals and bare times are not dates.
    """
    if not isinstance(value, str) or not value.strip():
        return False
    if parse_number(value) is not None:
        return False
    try:
        fields = _parsed_date_fields(value)
    except (ValueError, OverflowError):
        return False
    return any(required <= fields for required in CALENDAR_FIELD_SETS)


def is_valid_url(value: Any) -> bool:
    """Check whether the value is an absolute URL with scheme and host."""
    try:
        result = urlparse(to_text(value))
    except ValueError:
        return False
    return all([result.scheme, result.netloc])


# Order is significant: "0"/"1" columns resolve to boolean before numeric is tried.
TYPE_CHECKS: tuple[tuple[InferredType, Callable[[Any], bool]], ...] = (
    (InferredType.EMAIL, is_valid_email),
    (InferredType.BOOLEAN, is_boolean_like),
    (InferredType.DATE, is_valid_date),
    (InferredType.NUMERIC, is_canonical_number),
    (InferredType.URL, is_valid_url),
)


def infer_data_type(values: Iterable[Any]) -> InferredType:
    """Infer the semantic type of a column.

    Null-like values are ignored. The first type whose check passes for every
    remaining value wins; a column with no remaining values is ``unknown`` and
    one that matches no check is ``text``.

    Args:
    ----
        values: All raw values of the column, nulls included

    Returns:
    -------
        The inferred column type

    """
    present = [v for v in values if not is_null_like(v)]
    if not present:
        return InferredType.UNKNOWN

    for inferred_type, check in TYPE_CHECKS:
        if all(check(v) for v in present):
            return inferred_type

    return InferredType.TEXT
