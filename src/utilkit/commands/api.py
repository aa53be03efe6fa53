"""Command: list the exported helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.commands._base import Example, UtilCommand
from utilkit.core import HELPER_MODULES

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


def _examples() -> list[Example]:
    examples: list[Example] = [("utilkit api", "every helper module")]
    examples += [(f"utilkit api {name}", f"only utilkit.core.{name}") for name in HELPER_MODULES]
    examples += [
        ("utilkit -q api numbers", "qualified names, one per line"),
        ("utilkit -v api dates", "add the first docstring line"),
        ("utilkit --json api urls", "machine-readable listing"),
    ]
    return examples


@click.command(cls=UtilCommand, examples=_examples)
@click.argument("module", required=False, metavar=f"[{'|'.join(HELPER_MODULES)}]")
@click.pass_obj
def api(app: AppContext, module: str | None) -> None:
    """List exported helpers with their signatures."""
    app.emit(app.api.list_exports(module=module))
