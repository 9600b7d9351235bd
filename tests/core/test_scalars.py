"""
Tests for number literal recognition and formatting.
"""

import math

import pytest

from yamltree.core.scalars import format_number, is_numeric, parse_number


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("30", 30),
            ("-7", -7),
            ("+7", 7),
            ("007", 7),
            ("  42  ", 42),
            ("1.5", 1.5),
            ("-0.25", -0.25),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
            ("0x1F", 31),
            ("0o17", 15),
            ("0b101", 5),
        ],
    )
    def test_numeric_literals(self, text, expected):
        """Accepted literals map to the expected value."""
        result = parse_number(text)
        assert result == expected
        assert type(result) is type(expected)

    def test_infinity(self):
        """Infinity literals become float infinities."""
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "1_000", "NaN", "inf", "1.2.3", "12abc", "--1", "e5", "0x"],
    )
    def test_non_numeric_text(self, text):
        """Anything that is not entirely a number literal is rejected."""
        assert parse_number(text) is None
        assert not is_numeric(text)

    def test_unicode_digits_are_not_numbers(self):
        """Only ASCII digits count."""
        assert parse_number("٣") is None

    def test_integer_beyond_digit_limit(self):
        """Integer literals too long for int conversion become floats."""
        result = parse_number("1" * 5000)
        assert isinstance(result, float)
        assert result == math.inf


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (30, "30"),
            (-4, "-4"),
            (1.0, "1"),
            (-2.0, "-2"),
            (0.5, "0.5"),
            (1e21, "1e+21"),
            (1e-7, "1e-07"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (math.nan, "NaN"),
        ],
    )
    def test_formatting(self, value, expected):
        """Numbers render in decimal form."""
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [0, 12, -3.75, 1e21, 1e-7, 123456.789])
    def test_formatted_text_reads_back(self, value):
        """Formatted text is numeric text for the same value."""
        assert parse_number(format_number(value)) == value
