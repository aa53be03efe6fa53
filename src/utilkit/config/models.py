"""The ``[format]`` section of ``utilkit.toml``.

Values are checked when the settings load, so a misspelt locale or zone in
the config file fails at startup instead of on the first ``format-date``.
"""

from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, field_validator

from utilkit.core.dates import DateStyle, FormatDateParams


class FormatConfig(BaseModel):
    """[format] section: defaults for ``utilkit format-date``."""

    model_config = {"frozen": True, "extra": "forbid"}

    locale: str = "en-US"
    date_style: DateStyle = "short"
    time_style: DateStyle = "short"
    time_zone: str = "UTC"

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        try:
            Locale.parse(value.replace("-", "_"))
        except (UnknownLocaleError, ValueError) as exc:
            msg = f"unknown locale {value!r}"
            raise ValueError(msg) from exc
        return value

    @field_validator("time_zone")
    @classmethod
    def _known_time_zone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"unknown IANA time zone {value!r}"
            raise ValueError(msg) from exc
        return value

    def to_params(self, **overrides: Any) -> FormatDateParams:
        """Build :class:`FormatDateParams` from this section.

        Overrides that are None fall back to the configured value.
        """
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return FormatDateParams(**values)
