"""Date coercion, ISO strings, and locale-aware formatting.

Every helper accepts a ``datetime``, a ``date``, an ISO 8601 string, or
epoch milliseconds.  Naive values are taken as UTC.  Input that cannot be
coerced yields ``None``.  :func:`format_date` is the exception: it returns the
``"Invalid Date"`` marker for non-absent garbage.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, date, datetime, time, timedelta
from typing import Literal, NewType, TypeAlias, TypeGuard
from zoneinfo import ZoneInfo

from babel import Locale
from babel import dates as babel_dates
from pydantic import BaseModel

from utilkit.core.types import Maybe, is_absent

logger = logging.getLogger(__name__)

ValidDate = NewType("ValidDate", datetime)

DateInput: TypeAlias = datetime | date | str | int | float

DateStyle: TypeAlias = Literal["full", "long", "medium", "short"]

INVALID_DATE = "Invalid Date"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class FormatDateParams(BaseModel):
    """Options for :func:`format_date`.

    Attributes:
        locale: BCP 47 tag (``en-US``) or CLDR identifier (``en_US``).
        date_style: Date part style, or None to omit the date.
        time_style: Time part style, or None to omit the time.
        time_zone: IANA zone the value is rendered in.
    """

    model_config = {"frozen": True}

    locale: str = "en-US"
    date_style: DateStyle | None = "short"
    time_style: DateStyle | None = "short"
    time_zone: str = "UTC"


def is_valid_date(value: object) -> TypeGuard[ValidDate]:
    """Return True if *value* is a usable ``datetime`` instance.

    A plain ``date`` is rejected: it has no time or zone, so callers that
    narrow on this guard could not format or compare it as an instant.  Pass
    it through :func:`to_date` first to get UTC midnight.
    """
    return isinstance(value, datetime)


def _from_epoch_ms(value: int | float) -> datetime | None:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except OverflowError:
        logger.debug("Epoch milliseconds out of range: %r", value)
        return None


def _from_iso_string(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable date string: %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _coerce(value: DateInput) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=UTC)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)
    if isinstance(value, str):
        return _from_iso_string(value)
    return None


def to_date(value: Maybe[DateInput]) -> datetime | None:
    """Coerce *value* to a UTC ``datetime``, or None if impossible.

    Offsets are applied, so the result is always in UTC.  A value whose
    UTC instant falls outside ``datetime``'s year 1..9999 range is None.

    Examples:
        >>> to_date("2023-10-01")
        datetime.datetime(2023, 10, 1, 0, 0, tzinfo=datetime.timezone.utc)
        >>> to_date(0)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        >>> to_date("not a date") is None
        True
    """
    if is_absent(value):
        return None
    dt = _coerce(value)  # type: ignore[arg-type]
    if dt is None:
        return None
    try:
        return dt.astimezone(UTC)
    except OverflowError:
        logger.debug("Date outside the representable UTC range: %r", value)
        return None


def get_date_string(value: Maybe[DateInput]) -> str | None:
    """Return the UTC ``YYYY-MM-DD`` form of *value*."""
    dt = to_date(value)
    if dt is None:
        return None
    return dt.date().isoformat()


def get_date_time_string(value: Maybe[DateInput]) -> str | None:
    """Return the UTC ``YYYY-MM-DDTHH:MM:SS`` form of *value* (no fraction)."""
    dt = to_date(value)
    if dt is None:
        return None
    return dt.replace(tzinfo=None, microsecond=0).isoformat()


def is_between(value: DateInput, lower: DateInput, upper: DateInput) -> bool:
    """Inclusive check that *lower* <= *value* <= *upper*.

    Operand order is not normalised, so ``lower > upper`` is always False.
    Any operand that cannot be coerced makes the check False.
    """
    dt, lo, hi = to_date(value), to_date(lower), to_date(upper)
    if dt is None or lo is None or hi is None:
        return False
    return lo <= dt <= hi


def format_date(value: Maybe[DateInput], params: FormatDateParams | None = None) -> str | None:
    """Format *value* for display with Babel's CLDR data.

    Absent input gives None; anything else that is not a date gives
    ``"Invalid Date"``.  Defaults to the short date and short time in UTC
    for ``en-US``.
    """
    if is_absent(value):
        return None
    dt = to_date(value)
    if dt is None:
        return INVALID_DATE

    params = params or FormatDateParams()
    locale = Locale.parse(params.locale.replace("-", "_"))
    tz = ZoneInfo(params.time_zone)
    try:
        local = dt.astimezone(tz)
    except OverflowError:
        return INVALID_DATE

    date_style = params.date_style
    time_style = params.time_style
    if date_style is None and time_style is None:
        date_style = "short"

    if time_style is None:
        return babel_dates.format_date(local, format=date_style, locale=locale)
    time_part = babel_dates.format_time(local, format=time_style, tzinfo=tz, locale=locale)
    if date_style is None:
        return time_part
    date_part = babel_dates.format_date(local, format=date_style, locale=locale)
    glue = babel_dates.get_datetime_format(date_style, locale=locale)
    return glue.replace("'", "").replace("{0}", time_part).replace("{1}", date_part)


__all__ = [
    "INVALID_DATE",
    "FormatDateParams",
    "ValidDate",
    "format_date",
    "get_date_string",
    "get_date_time_string",
    "is_between",
    "is_valid_date",
    "to_date",
]
