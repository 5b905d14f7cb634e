"""Helpers for interpreting raw cell values.

Records come from loosely typed sources (CSV text, decoded JSON), so a cell may
hold a string, a number, a boolean or nothing at all. These helpers give every
component the same view of what counts as "missing", how a value reads as text
and how numbers are rounded in the report.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

NULL_LIKE_STRINGS = frozenset({"", "null", "undefined"})


def is_null_like(value: Any) -> bool:
    """Return True for None, empty strings and the literals "null"/"undefined"."""
    if value is None:
        return True
    return isinstance(value, str) and value in NULL_LIKE_STRINGS


def format_number(number: float) -> str:
    """Format a number the way JavaScript's ``Number.prototype.toString`` does.

    Uploaded data is usually produced by browser tooling, so "canonical" numeric
    text is the ECMAScript rendering: no trailing ``.0``, positional notation
    between 1e-6 and 1e21, ``e+``/``e-`` exponents outside that range.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    decimal = Decimal(repr(abs(float(number)))).normalize()
    _, digit_tuple, exponent = decimal.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        exp_sign = "+" if e >= 0 else "-"
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{exp_sign}{abs(e)}"
    return sign + text


def as_float(number: int | float) -> float:
    """Convert a Python number to float the way JavaScript's ``Number()`` does.

    Integers too large for a double become signed infinities instead of raising.
    """
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def to_text(value: Any) -> str:
    """Render a value as text using JavaScript ``String()`` conventions."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(as_float(value))
    return str(value)


def parse_number(value: Any) -> float | None:
    """Parse a value into a float, or None when it is not a number.

    Booleans are never numbers here even though Python treats them as ints.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = as_float(value)
        return None if math.isnan(number) else number
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


def is_canonical_number(value: Any) -> bool:
    """Return True when the value is a number or a string that round-trips as one.

    ``"42"`` and ``"3.5"`` pass; ``" 42"``, ``"42.0"``, ``"1e3"`` and ``"0x10"``
    do not, because formatting the parsed number gives different text.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return not (isinstance(value, float) and math.isnan(value))
    if not isinstance(value, str):
        return False
    number = parse_number(value)
    if number is None:
        return False
    return format_number(number) == value


def distinct_key(value: Any) -> tuple[str, Any]:
    """Key used for uniqueness so that ``1`` and ``"1"`` (or ``True`` and ``1``) differ."""
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        return ("number", as_float(value))
    if isinstance(value, (str, bytes)):
        return ("string", value)
    try:
        hash(value)
    except TypeError:
        return ("object", id(value))
    return ("object", value)


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals, ties away from zero as in ``toFixed``."""
    if math.isnan(value) or math.isinf(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_score(value: float) -> int:
    """Round a score to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
