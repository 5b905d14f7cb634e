"""Test column type inference."""

from __future__ import annotations

import pytest

from tablequality.models.report import InferredType
from tablequality.profiling.type_inference import (
    infer_data_type,
    is_boolean_like,
    is_valid_date,
    is_valid_email,
    is_valid_url,
)


class TestInferDataType:
    """Test the ordered type cascade."""

    def test_empty_column_is_unknown(self):
        """Test a column with no values is unknown."""
        assert infer_data_type([]) == InferredType.UNKNOWN

    def test_all_null_like_is_unknown(self):
        """Test a column of null-like values is unknown."""
        assert infer_data_type([None, "", "null", "undefined"]) == InferredType.UNKNOWN

    def test_emails(self):
        """Test a column of email addresses."""
        values = ["ann@example.com", "bob@example.org", None]
        assert infer_data_type(values) == InferredType.EMAIL

    def test_zero_one_strings_are_boolean_not_numeric(self):
        """Test boolean is checked before numeric."""
        assert infer_data_type(["0", "1", "0", "1"]) == InferredType.BOOLEAN

    def test_zero_one_integers_are_boolean(self):
        """Test integer 0/1 columns also resolve to boolean."""
        assert infer_data_type([0, 1, 1, 0]) == InferredType.BOOLEAN

    def test_boolean_words_any_case(self):
        """Test boolean literals are case-insensitive."""
        assert infer_data_type(["true", "False", "YES", "no"]) == InferredType.BOOLEAN

    def test_python_booleans(self):
        """Test native booleans are boolean."""
        assert infer_data_type([True, False, True]) == InferredType.BOOLEAN

    def test_iso_dates(self):
        """Test ISO dates and timestamps are dates."""
        values = ["2024-01-15", "2023-12-31", "2024-02-29T10:30:00"]
        assert infer_data_type(values) == InferredType.DATE

    def test_numeric_strings(self):
        """Test canonical numeric strings are numeric."""
        assert infer_data_type(["10", "20", "30.5", "-4"]) == InferredType.NUMERIC

    def test_native_numbers(self):
        """Test ints and floats are numeric."""
        assert infer_data_type([1.5, 2, 300]) == InferredType.NUMERIC

    @pytest.mark.parametrize(
        "values",
        [["Mon", "Wed"], ["May", "June"], ["10:30", "11:45"], ["1st", "2nd"]],
    )
    def test_partial_dates_are_text(self, values):
        """Test weekdays, month names, times and ordinals are not dates."""
        assert infer_data_type(values) == InferredType.TEXT

    def test_urls(self):
        """Test absolute URLs are urls."""
        values = ["https://example.com", "http://example.org/path?q=1"]
        assert infer_data_type(values) == InferredType.URL

    def test_plain_words_are_text(self):
        """Test free text falls through to text."""
        assert infer_data_type(["apple", "banana", "cherry"]) == InferredType.TEXT

    def test_one_bad_email_makes_column_text(self):
        """Test every value must pass for a type to win."""
        values = ["a@b.com", "not-an-email", "c@d.org"]
        assert infer_data_type(values) == InferredType.TEXT

    def test_padded_number_makes_column_text(self):
        """Test a value that only partially parses prevents numeric."""
        assert infer_data_type(["10", " 10"]) == InferredType.TEXT

    def test_mixed_numbers_and_words_are_text(self):
        """Test a single non-number breaks the numeric rule."""
        assert infer_data_type(["42", "forty-two"]) == InferredType.TEXT

    def test_null_like_values_are_ignored(self):
        """Test nulls and null literals do not affect the decision."""
        assert infer_data_type(["1", None, "", "null", "0"]) == InferredType.BOOLEAN

    def test_deterministic(self):
        """Test inference gives the same answer on repeated calls."""
        values = ["2024-01-15", "2024-03-01"]
        assert infer_data_type(values) == infer_data_type(values)


class TestValueChecks:
    """Test the individual value checks."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("a@b.co", True),
            ("first.last@sub.example.com", True),
            ("a@b", False),
            ("a b@c.com", False),
            ("a@@b.com", False),
            ("@b.com", False),
            (42, False),
        ],
    )
    def test_is_valid_email(self, value, expected):
        """Test the email pattern."""
        assert is_valid_email(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("yes", True), ("NO", True), ("1", True), (0, True), ("2", False), ("y", False)],
    )
    def test_is_boolean_like(self, value, expected):
        """Test boolean literals."""
        assert is_boolean_like(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-01-15", True),
            ("2024-01-15 08:45:00", True),
            ("12", False),
            ("3.5", False),
            (20240115, False),
            ("", False),
            ("not a date at all", False),
            ("March 5", True),
            ("June 2024", True),
            ("Mon", False),
            ("May", False),
            ("10:30", False),
            ("1st", False),
        ],
    )
    def test_is_valid_date(self, value, expected):
        """Test date parsing rejects numbers and nonsense."""
        assert is_valid_date(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("https://example.com", True),
            ("ftp://files.example.com/a.csv", True),
            ("example.com", False),
            ("/relative/path", False),
            ("just text", False),
        ],
    )
    def test_is_valid_url(self, value, expected):
        """Test URLs need a scheme and a host."""
        assert is_valid_url(value) is expected
