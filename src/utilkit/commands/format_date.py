"""Command: format a date with locale-aware styles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.commands._base import Example, UtilCommand

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext

_STYLES = click.Choice(["full", "long", "medium", "short"])

EXAMPLES: list[Example] = [
    ("utilkit format-date 2023-10-01T15:30:00Z", "short date and time in UTC"),
    ("utilkit format-date 1696174200000 --locale de-DE", "epoch milliseconds, German"),
    (
        "utilkit format-date 2023-10-01 --date-style long --time-zone Europe/Paris",
        "long date in Paris",
    ),
    ("utilkit format-date 2023-10-01 --time-style full", "time with zone name"),
    ("utilkit -q format-date 2023-10-01", "only the formatted text"),
]


@click.command("format-date", cls=UtilCommand, examples=EXAMPLES)
@click.argument("value")
@click.option("--locale", default=None, help="BCP 47 locale tag (default from config).")
@click.option("--date-style", type=_STYLES, default=None, help="Date part style.")
@click.option("--time-style", type=_STYLES, default=None, help="Time part style.")
@click.option("--time-zone", default=None, help="IANA time zone name.")
@click.pass_obj
def format_date_cmd(
    app: AppContext,
    value: str,
    locale: str | None,
    date_style: str | None,
    time_style: str | None,
    time_zone: str | None,
) -> None:
    """Format VALUE (ISO 8601 text or epoch milliseconds)."""
    app.emit(
        app.dates.format(
            value,
            locale=locale,
            date_style=date_style,
            time_style=time_style,
            time_zone=time_zone,
        )
    )
