"""Tests for numeric helpers."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from utilkit.core.numbers import (
    HOURS_PER_UNIT,
    bytes_to_megabytes,
    clamp,
    convert_pay_rate,
    in_range,
    inclusive_range,
    normalize_ratio,
    parse_number,
    percentage,
    wrap,
)
from utilkit.core.types import UNDEFINED, PayRate


class TestParseNumber:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            ("0", 0),
            ("-7", -7),
            ("3.14", 3.14),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("  12  ", 12),
            ("+5", 5),
            ("0x1F", 31),
            ("0b101", 5),
            ("0o17", 15),
        ],
    )
    def test_numeric_strings(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    def test_integer_literal_returns_int(self) -> None:
        assert isinstance(parse_number("42"), int)

    def test_infinity(self) -> None:
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    @pytest.mark.parametrize(
        "text", ["NaN", "abc", "123abc", "inf", "1_000", "0xZZ", "-0x10", "1.2.3"]
    )
    def test_non_numeric_is_absent(self, text: str) -> None:
        assert parse_number(text) is None

    @pytest.mark.parametrize("text", ["", None, UNDEFINED])
    def test_empty_or_absent(self, text: object) -> None:
        assert parse_number(text) is None

    def test_whitespace_only_is_zero(self) -> None:
        assert parse_number("   ") == 0

    def test_huge_integer_literal_saturates(self) -> None:
        assert parse_number("1" * 5000) == math.inf
        assert parse_number("-" + "9" * 5000) == -math.inf

    @pytest.mark.parametrize("text", ["٣", "١٢", "1.٥", "１"])
    def test_non_ascii_digits_are_rejected(self, text: str) -> None:
        assert parse_number(text) is None


class TestClamp:
    @pytest.mark.parametrize(
        "value,lower,upper,expected",
        [(5, 1, 10, 5), (0, 1, 10, 1), (15, 1, 10, 10), (-5, -10, -1, -5)],
    )
    def test_clamp(self, value: float, lower: float, upper: float, expected: float) -> None:
        assert clamp(value, lower, upper) == expected


class TestWrap:
    @pytest.mark.parametrize(
        "value,expected",
        [(12, 2), (10, 0), (0, 0), (9, 9), (-1, 9), (-11, 9), (25, 5)],
    )
    def test_wraps_into_half_open_range(self, value: float, expected: float) -> None:
        assert wrap(value, 0, 10) == expected

    def test_offset_range(self) -> None:
        assert wrap(13, 5, 10) == 8
        assert wrap(4, 5, 10) == 9

    def test_degrees(self) -> None:
        assert wrap(-90, 0, 360) == 270

    def test_zero_span_is_nan(self) -> None:
        assert math.isnan(wrap(3, 5, 5))


class TestInRange:
    def test_inside(self) -> None:
        assert in_range(5, 1, 10)

    def test_bounds_inclusive(self) -> None:
        assert in_range(1, 1, 10)
        assert in_range(10, 1, 10)

    def test_outside(self) -> None:
        assert not in_range(0, 1, 10)
        assert not in_range(15, 1, 10)

    def test_bounds_in_either_order(self) -> None:
        assert in_range(5, 10, 1)
        assert in_range(-5, -1, -10)


class TestPercentage:
    def test_basic(self) -> None:
        assert percentage(50, 200) == 25
        assert percentage(75, 300) == 25

    def test_zero_max_is_zero(self) -> None:
        assert percentage(100, 0) == 0


class TestBytesToMegabytes:
    def test_exact(self) -> None:
        assert bytes_to_megabytes(1048576) == "1.00"

    def test_fraction(self) -> None:
        assert bytes_to_megabytes(1572864) == "1.50"

    def test_zero(self) -> None:
        assert bytes_to_megabytes(0) == "0.00"


class TestNormalizeRatio:
    @pytest.mark.parametrize(
        "value,lower,upper,expected",
        [(5, 0, 10, 0.5), (0, 0, 10, 0), (10, 0, 10, 1), (-5, -10, 0, 0.5), (15, 10, 20, 0.5)],
    )
    def test_ratio(self, value: float, lower: float, upper: float, expected: float) -> None:
        assert normalize_ratio(value, lower, upper) == expected

    def test_out_of_range_is_not_clamped(self) -> None:
        assert normalize_ratio(20, 0, 10) == 2

    def test_zero_span_is_ieee(self) -> None:
        """Not guarded: a zero span gives inf or nan rather than raising."""
        assert normalize_ratio(5, 3, 3) == math.inf
        assert normalize_ratio(1, 3, 3) == -math.inf
        assert math.isnan(normalize_ratio(3, 3, 3))


class TestInclusiveRange:
    def test_ascending(self) -> None:
        assert list(inclusive_range(1, 5)) == [1, 2, 3, 4, 5]

    def test_descending(self) -> None:
        assert list(inclusive_range(5, 1)) == [5, 4, 3, 2, 1]

    def test_single_value(self) -> None:
        assert list(inclusive_range(0, 0)) == [0]
        assert list(inclusive_range(5, 5)) == [5]

    def test_step(self) -> None:
        assert list(inclusive_range(1, 10, 2)) == [1, 3, 5, 7, 9]
        assert list(inclusive_range(0, 10, 3)) == [0, 3, 6, 9]

    def test_step_sign_is_ignored(self) -> None:
        assert list(inclusive_range(10, 0, -2)) == [10, 8, 6, 4, 2, 0]
        assert list(inclusive_range(10, 0, 2)) == [10, 8, 6, 4, 2, 0]

    def test_each_call_is_independent(self) -> None:
        first = inclusive_range(1, 3)
        assert next(first) == 1
        assert list(inclusive_range(1, 3)) == [1, 2, 3]
        assert list(first) == [2, 3]

    def test_zero_step_raises(self) -> None:
        with pytest.raises(ValueError, match="step"):
            inclusive_range(1, 5, 0)


class TestConvertPayRate:
    def test_hour_to_day(self) -> None:
        result = convert_pay_rate(PayRate(value=100, unit="hour"), "day")
        assert result == PayRate(value=800, unit="day")

    def test_accepts_mapping(self) -> None:
        assert convert_pay_rate({"value": 100, "unit": "hour"}, "day").value == 800

    def test_day_to_week(self) -> None:
        assert convert_pay_rate(PayRate(value=200, unit="day"), "week").value == 1000

    def test_year_to_hour(self) -> None:
        assert convert_pay_rate(PayRate(value=52000, unit="year"), "hour").value == 25

    def test_month_uses_calendar_model(self) -> None:
        assert HOURS_PER_UNIT["month"] == pytest.approx(173.333, abs=1e-3)
        assert convert_pay_rate(PayRate(value=10, unit="hour"), "month").value == 1733.33

    def test_rounds_to_two_decimals(self) -> None:
        assert convert_pay_rate(PayRate(value=100, unit="day"), "hour").value == 12.5
        assert convert_pay_rate(PayRate(value=1000, unit="month"), "hour").value == 5.77

    def test_same_unit(self) -> None:
        assert convert_pay_rate(PayRate(value=10.126, unit="week"), "week").value == 10.13

    def test_unknown_target_unit(self) -> None:
        with pytest.raises(ValueError, match="Unknown pay-rate unit"):
            convert_pay_rate(PayRate(value=1, unit="hour"), "fortnight")  # type: ignore[arg-type]

    def test_unknown_source_unit(self) -> None:
        with pytest.raises(ValidationError):
            convert_pay_rate({"value": 1, "unit": "decade"}, "hour")
