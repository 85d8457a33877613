"""Tests for localekit.i18n.numbers module."""

import math
from decimal import Decimal

import pytest

from localekit.i18n.numbers import (
    DEFAULT_NUMBER_FORMAT,
    NumberFormat,
    apply_unit_format,
    human_size_parts,
    to_number,
)


class TestToNumber:
    """Tests for to_number()."""

    def test_grouping_and_precision(self):
        result = to_number(
            1234567.5, NumberFormat(precision=2, delimiter=",", separator=".")
        )
        assert result == "1,234,567.50"

    def test_defaults(self):
        """Default precision is 3 with "," and "."."""
        assert to_number(1000) == "1,000.000"
        assert to_number(999) == "999.000"

    def test_custom_separator_and_delimiter(self):
        result = to_number(
            1234.5, NumberFormat(precision=2, delimiter=".", separator=",")
        )
        assert result == "1.234,50"

    def test_negative(self):
        """The sign is stripped before grouping and re-applied after."""
        assert to_number(-1234.567, NumberFormat(precision=2)) == "-1,234.57"

    def test_negative_rounding_to_zero_keeps_sign(self):
        assert to_number(-0.001, NumberFormat(precision=2)) == "-0.00"

    def test_half_up_rounding(self):
        assert to_number(0.5, NumberFormat(precision=0)) == "1"
        assert to_number(2.5, NumberFormat(precision=0)) == "3"

    @pytest.mark.parametrize("n", [0, 7, 1234567, 1000000000])
    def test_integer_round_trip(self, n):
        """Precision 0 without delimiter gives the integer's decimal string."""
        assert to_number(n, NumberFormat(precision=0, delimiter="")) == str(n)

    def test_strip_insignificant_zeros(self):
        fmt = NumberFormat(precision=3, strip_insignificant_zeros=True)
        assert to_number(1.5, fmt) == "1.5"
        assert to_number(2, fmt) == "2"
        assert to_number(1234.25, fmt) == "1,234.25"

    def test_strip_leaves_integer_zeros(self):
        """Stripping only touches the fractional part."""
        fmt = NumberFormat(precision=0, strip_insignificant_zeros=True)
        assert to_number(1000, fmt) == "1,000"

    def test_decimal_input(self):
        assert to_number(Decimal("12.345"), NumberFormat(precision=2)) == "12.35"

    @pytest.mark.parametrize(
        "number, expected",
        [
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (Decimal("NaN"), "NaN"),
        ],
    )
    def test_non_finite(self, number, expected):
        """Non-finite numbers format as their names, not as digits."""
        assert to_number(number, NumberFormat(precision=2)) == expected

    def test_large_float(self):
        assert to_number(1e30, NumberFormat(precision=0, delimiter="")) == str(
            int(Decimal(1e30))
        )


class TestNumberFormat:
    """Tests for NumberFormat."""

    def test_merge_precedence(self):
        merged = NumberFormat.merge(
            NumberFormat(precision=1), NumberFormat(precision=2, separator=","), None
        )
        assert merged.precision == 1
        assert merged.separator == ","
        assert merged.delimiter is None

    def test_merge_with_defaults(self):
        merged = NumberFormat.merge(NumberFormat(), DEFAULT_NUMBER_FORMAT)
        assert merged == DEFAULT_NUMBER_FORMAT

    def test_from_mapping(self):
        fmt = NumberFormat.from_mapping(
            {"precision": "2", "separator": ",", "delimiter": ".", "unit": "x"}
        )
        assert fmt == NumberFormat(precision=2, separator=",", delimiter=".")

    def test_from_non_mapping(self):
        assert NumberFormat.from_mapping("nope") == NumberFormat()
        assert NumberFormat.from_mapping(None) == NumberFormat()


class TestHumanSize:
    """Tests for human size helpers."""

    def test_bytes(self):
        assert human_size_parts(512) == (512.0, None, 0)

    def test_kilobytes_fractional(self):
        assert human_size_parts(1536) == (1.5, "kb", 1)

    def test_megabytes_whole(self):
        assert human_size_parts(1024 * 1024) == (1.0, "mb", 0)

    def test_capped_at_terabytes(self):
        size, unit, _ = human_size_parts(1024**5)
        assert unit == "tb"
        assert size == 1024.0

    def test_apply_unit_format(self):
        assert apply_unit_format("%n %u", "1.5", "KB") == "1.5 KB"
