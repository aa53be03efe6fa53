"""Unified settings: CLI flags, env vars, and ``utilkit.toml`` in one object.

Priority chain (highest to lowest):
  1. Init kwargs   (global CLI flags)
  2. Env vars      ``UTILKIT_*``, nested with ``__`` (``UTILKIT_FORMAT__LOCALE``)
  3. TOML file     found by :func:`~utilkit.config.discovery.resolve_config`
  4. Code defaults in :class:`~utilkit.config.models.FormatConfig`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from utilkit.config.discovery import ConfigError, resolve_config
from utilkit.config.models import FormatConfig


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed ``utilkit.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Parsed TOML for the settings object under construction on this thread.
_pending = threading.local()


def _describe(exc: ValidationError, config_path: Path | None) -> str:
    origin = str(config_path) if config_path else "settings"
    problems = []
    for error in exc.errors():
        where = ".".join(str(part) for part in error["loc"])
        problems.append(f"  {where}: {error['msg']}")
    return f"Invalid {origin}:\n" + "\n".join(problems)


class UtilkitSettings(BaseSettings):
    """Unified settings for the utilkit CLI.

    Stored on the :class:`~utilkit.commands._context.AppContext` at the CLI
    root level.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        format: Defaults for ``format-date``.
    """

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "env_prefix": "UTILKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    format: FormatConfig = Field(default_factory=FormatConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        data = getattr(_pending, "toml", None) or {}
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, data))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> UtilkitSettings:
        """Build settings for one invocation.

        Reads the explicit *config_path*, or the file discovery finds from
        *start*, and layers env vars and *cli_flags* on top.

        Raises:
            ConfigError: If the file is missing, is not TOML, or holds an
                unknown key or a bad ``[format]`` value.
        """
        toml_path = resolve_config(config_path, start)
        _pending.toml = _read_toml(toml_path) if toml_path else {}
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            raise ConfigError(_describe(exc, toml_path)) from exc
        finally:
            _pending.toml = None
