"""Numeric helpers for parsing, bounding, ranges, and pay-rate conversion.

Preconditions (``lower <= upper``, non-zero spans) are the caller's
responsibility.  Where a zero span would divide by zero, the IEEE float
result (``inf`` / ``nan``) is returned instead of raising.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Mapping
from typing import Any

from utilkit.core.types import Maybe, PayRate, PayRateUnit

# Number() grammar: decimal literals, signed Infinity, unsigned radix literals.
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity",
    re.ASCII,
)
_RADIX_PATTERN = re.compile(r"0([xXoObB])([0-9a-zA-Z]+)")
_RADIX_BASES: dict[str, int] = {"x": 16, "o": 8, "b": 2}

HOURS_PER_DAY = 8
DAYS_PER_WEEK = 5
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

HOURS_PER_UNIT: dict[str, float] = {
    "hour": 1,
    "day": HOURS_PER_DAY,
    "week": HOURS_PER_DAY * DAYS_PER_WEEK,
    "month": HOURS_PER_DAY * DAYS_PER_WEEK * WEEKS_PER_YEAR / MONTHS_PER_YEAR,
    "year": HOURS_PER_DAY * DAYS_PER_WEEK * WEEKS_PER_YEAR,
}

BYTES_PER_MEGABYTE = 1024 * 1024


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def parse_number(text: Maybe[str]) -> int | float | None:
    """Parse *text* as a number, returning None instead of NaN.

    Examples:
        >>> parse_number("42")
        42
        >>> parse_number("3.14")
        3.14
        >>> parse_number("Infinity")
        inf
        >>> parse_number("0x1F")
        31
        >>> parse_number("NaN") is None
        True
        >>> parse_number("123abc") is None
        True
    """
    if not isinstance(text, str) or text == "":
        return None
    stripped = text.strip()
    if not stripped:
        return 0
    if _INTEGER_PATTERN.fullmatch(stripped):
        try:
            return int(stripped)
        except ValueError:
            # Past the interpreter's int digit limit; float() saturates to inf.
            return float(stripped)
    if _DECIMAL_PATTERN.fullmatch(stripped):
        return float(stripped)
    radix = _RADIX_PATTERN.fullmatch(stripped)
    if radix:
        try:
            return int(radix.group(2), _RADIX_BASES[radix.group(1).lower()])
        except ValueError:
            return None
    return None


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound *value* to ``[lower, upper]``."""
    return max(lower, min(upper, value))


def wrap(value: float, lower: float, upper: float) -> float:
    """Wrap *value* into ``[lower, upper)`` with modular arithmetic.

    Examples:
        >>> wrap(12, 0, 10)
        2
        >>> wrap(-1, 0, 10)
        9
        >>> wrap(370, 0, 360)
        10
    """
    span = upper - lower
    if span == 0:
        return math.nan
    return (((value - lower) % span) + span) % span + lower


def in_range(value: float, a: float, b: float) -> bool:
    """Inclusive range check; the bounds may be given in either order."""
    return min(a, b) <= value <= max(a, b)


def percentage(value: float, maximum: float) -> float:
    """Return *value* as a percentage of *maximum* (0 when *maximum* is 0)."""
    if maximum == 0:
        return 0
    return value * 100 / maximum


def bytes_to_megabytes(size: float) -> str:
    """Convert a byte count to megabytes, formatted with two decimals."""
    return f"{size / BYTES_PER_MEGABYTE:.2f}"


def normalize_ratio(value: float, lower: float, upper: float) -> float:
    """Position of *value* between *lower* and *upper* as a 0..1 ratio.

    Not guarded: ``lower == upper`` gives ``inf`` or ``nan``.
    """
    return _divide(value - lower, upper - lower)


def _walk(start: int, delta: int, direction: int, step: int) -> Iterator[int]:
    i = 0
    while i <= delta:
        yield start + i * direction
        i += step


def inclusive_range(start: int, end: int, step: int = 1) -> Iterator[int]:
    """Iterate from *start* to *end*, both inclusive.

    Direction comes from comparing *start* and *end*; only the magnitude of
    *step* is used.

    Examples:
        >>> list(inclusive_range(1, 5))
        [1, 2, 3, 4, 5]
        >>> list(inclusive_range(5, 1))
        [5, 4, 3, 2, 1]
        >>> list(inclusive_range(10, 0, -2))
        [10, 8, 6, 4, 2, 0]

    Raises:
        ValueError: If *step* is zero.
    """
    step = abs(step)
    if step == 0:
        msg = "inclusive_range() step must not be zero"
        raise ValueError(msg)
    direction = 1 if start < end else -1
    return _walk(start, abs(start - end), direction, step)


def convert_pay_rate(rate: PayRate | Mapping[str, Any], target_unit: PayRateUnit) -> PayRate:
    """Convert a pay rate to another time unit.

    Uses 8-hour days, 5-day weeks, 52-week years, and 12-month years;
    the converted value is rounded half-up to two decimals.

    Examples:
        >>> convert_pay_rate(PayRate(value=100, unit="hour"), "day").value
        800.0

    Raises:
        ValueError: If *target_unit* is not a known unit, or *rate* does not
            validate as a :class:`PayRate`.
    """
    if not isinstance(rate, PayRate):
        rate = PayRate.model_validate(rate)
    target_hours = HOURS_PER_UNIT.get(target_unit)
    if target_hours is None:
        msg = f"Unknown pay-rate unit: {target_unit!r}"
        raise ValueError(msg)
    hourly = rate.value / HOURS_PER_UNIT[rate.unit]
    return PayRate(value=_round_half_up(hourly * target_hours, 2), unit=target_unit)


__all__ = [
    "HOURS_PER_UNIT",
    "bytes_to_megabytes",
    "clamp",
    "convert_pay_rate",
    "in_range",
    "inclusive_range",
    "normalize_ratio",
    "parse_number",
    "percentage",
    "wrap",
]
