"""Test raw value helpers."""

from __future__ import annotations

import pytest

from tablequality.profiling.values import (
    as_float,
    distinct_key,
    format_number,
    is_canonical_number,
    is_null_like,
    parse_number,
    round_half_up,
    round_score,
    safe_divide,
    to_text,
)


class TestIsNullLike:
    """Test null-like detection."""

    @pytest.mark.parametrize("value", [None, "", "null", "undefined"])
    def test_null_like_values(self, value):
        """Test None, empty string and null literals are null-like."""
        assert is_null_like(value) is True

    @pytest.mark.parametrize("value", [0, False, " ", "NULL", "None", 0.0, []])
    def test_present_values(self, value):
        """Test falsy but meaningful values are not null-like."""
        assert is_null_like(value) is False


class TestFormatNumber:
    """Test JavaScript-style number formatting."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (1.0, "1"),
            (0.1, "0.1"),
            (-5.5, "-5.5"),
            (123.456, "123.456"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (2.5e25, "2.5e+25"),
            (0.0, "0"),
            (-0.0, "0"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (float("nan"), "NaN"),
        ],
    )
    def test_formats_like_javascript(self, number, expected):
        """Test formatting matches Number.prototype.toString."""
        assert format_number(number) == expected

    def test_to_text_booleans_are_lowercase(self):
        """Test booleans render as true/false."""
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_to_text_integral_float(self):
        """Test integral floats drop the trailing .0."""
        assert to_text(42.0) == "42"
        assert to_text(7) == "7"

    def test_to_text_huge_int_is_infinity(self):
        """Test ints beyond double range render as JavaScript would."""
        assert to_text(10**400) == "Infinity"
        assert to_text(-(10**400)) == "-Infinity"


class TestIsCanonicalNumber:
    """Test numeric round-trip detection."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("42", True),
            ("3.14", True),
            ("-7", True),
            ("0.5", True),
            ("Infinity", True),
            (5, True),
            (2.5, True),
            (float("inf"), True),
            (10**400, True),
            ("42.0", False),
            (" 42", False),
            ("42 ", False),
            ("1e3", False),
            ("0x10", False),
            ("1_000", False),
            ("007", False),
            (".5", False),
            ("+5", False),
            ("NaN", False),
            ("abc", False),
            (True, False),
            (float("nan"), False),
            (None, False),
        ],
    )
    def test_round_trip(self, value, expected):
        """Test only values whose text survives a parse/format cycle pass."""
        assert is_canonical_number(value) is expected


class TestDistinctKey:
    """Test uniqueness keys."""

    def test_int_and_float_are_equal(self):
        """Test 1 and 1.0 are the same number."""
        assert distinct_key(1) == distinct_key(1.0)

    def test_number_and_string_differ(self):
        """Test 1 and "1" are distinct."""
        assert distinct_key(1) != distinct_key("1")

    def test_boolean_and_number_differ(self):
        """Test True and 1 are distinct."""
        assert distinct_key(True) != distinct_key(1)

    def test_huge_ints_do_not_raise(self):
        """Test ints beyond double range key as infinity."""
        assert distinct_key(10**400) == ("number", float("inf"))
        assert distinct_key(10**400) == distinct_key(10**401)

    def test_unhashable_values_are_supported(self):
        """Test unhashable values produce a usable key."""
        assert hash(distinct_key(["a"]))


class TestRounding:
    """Test rounding helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.125, 0.13),
            (98.125, 98.13),
            (-0.125, -0.13),
            (1.005, 1.0),
            (2.675, 2.67),
            (33.3333, 33.33),
            (10, 10.0),
        ],
    )
    def test_round_half_up(self, value, expected):
        """Test exact halves round away from zero, binary values as stored."""
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(98.5, 99), (97.49, 97), (62.5, 63), (0.0, 0), (100.0, 100)],
    )
    def test_round_score(self, value, expected):
        """Test score rounding sends halves up."""
        assert round_score(value) == expected

    def test_safe_divide_by_zero(self):
        """Test division by zero yields zero."""
        assert safe_divide(5, 0) == 0.0
        assert safe_divide(1, 4) == 0.25


class TestNumberConversion:
    """Test conversion of Python numbers to floats."""

    def test_as_float_small_numbers(self):
        """Test ordinary ints and floats convert unchanged."""
        assert as_float(3) == 3.0
        assert as_float(2.5) == 2.5

    def test_as_float_huge_ints(self):
        """Test ints beyond double range become signed infinities."""
        assert as_float(10**400) == float("inf")
        assert as_float(-(10**400)) == float("-inf")

    def test_parse_number_huge_int(self):
        """Test parsing a huge int gives infinity, matching its text form."""
        assert parse_number(10**400) == float("inf")
        assert parse_number("1" + "0" * 400) == float("inf")
