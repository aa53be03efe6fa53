"""Subcommand modules for utilkit.

Provides register_commands() which uses deferred imports to keep
``utilkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from utilkit.commands.api import api
    from utilkit.commands.format_date import format_date_cmd

    cli.add_command(api)
    cli.add_command(format_date_cmd)
