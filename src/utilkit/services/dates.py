"""DateService — format dates from the shell with configured defaults."""

from __future__ import annotations

from typing import Any

from babel import UnknownLocaleError

from utilkit.core.dates import INVALID_DATE, format_date, get_date_time_string
from utilkit.core.numbers import parse_number
from utilkit.services.base import BaseService
from utilkit.services.result import ServiceResult


class DateService(BaseService):
    """Date operations for the ``format-date`` command."""

    def format(
        self,
        value: str,
        *,
        locale: str | None = None,
        date_style: str | None = None,
        time_style: str | None = None,
        time_zone: str | None = None,
    ) -> ServiceResult:
        """Format *value* (ISO text or epoch milliseconds).

        Unset options fall back to the ``[format]`` config section.
        Unknown locales or time zones become an ``INVALID_OPTION`` error.
        """
        op = "format_date"
        try:
            params = self._settings.format.to_params(
                locale=locale,
                date_style=date_style,
                time_style=time_style,
                time_zone=time_zone,
            )
        except ValueError as exc:
            return self._error(op, "INVALID_OPTION", str(exc))

        number = parse_number(value)
        parsed: Any = number if number is not None else value

        try:
            formatted = format_date(parsed, params)
        except (UnknownLocaleError, ValueError, LookupError) as exc:
            return self._error(op, "INVALID_OPTION", str(exc), params.model_dump())

        warnings = [f"Could not parse date: {value}"] if formatted == INVALID_DATE else []
        return self._ok(
            op,
            {
                "input": value,
                "formatted": formatted,
                "utc": get_date_time_string(parsed),
                "locale": params.locale,
                "time_zone": params.time_zone,
            },
            warnings=warnings,
        )
