"""Locate the ``utilkit.toml`` a CLI invocation should read.

Lookup order: an explicit ``--config`` path, then ``$UTILKIT_CONFIG``, then
the nearest ``utilkit.toml`` in the start directory or any parent of it.
Finding nothing is fine; the settings then run on code defaults.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import click

CONFIG_FILENAME = "utilkit.toml"
CONFIG_ENV_VAR = "UTILKIT_CONFIG"

logger = logging.getLogger(__name__)


class ConfigError(click.ClickException):
    """A config file that cannot be found, parsed, or validated."""


def _search_dirs(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the file named by ``$UTILKIT_CONFIG`` or the nearest ``utilkit.toml``.

    An env var naming a missing file disables the walk-up and gives None.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if path.is_file():
            return path
        logger.debug("%s names a missing file: %s", CONFIG_ENV_VAR, path)
        return None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Using config %s", candidate)
            return candidate
    return None


def resolve_config(explicit: str | Path | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for one invocation.

    Raises:
        ConfigError: If *explicit* is given but is not a file.
    """
    if explicit is None or explicit == "":
        return find_config(start)
    path = Path(explicit)
    if not path.is_file():
        msg = f"Config file not found: {path}"
        raise ConfigError(msg)
    return path
