"""Click base classes that add an ``--examples`` flag to utilkit commands.

Examples are ``(invocation, note)`` pairs printed as an aligned list.  A
command may pass a callable instead of a list when its examples depend on
data, as ``utilkit api`` does with the helper module names.  ``--help``
stays short and the examples are only built when asked for.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

import click

Example: TypeAlias = tuple[str, str]
Examples: TypeAlias = Sequence[Example] | Callable[[], Sequence[Example]]


def render_examples(examples: Sequence[Example]) -> str:
    """Lay out *examples* with the notes aligned in one column.

    Examples:
        >>> print(render_examples([("utilkit api", "all modules"), ("utilkit -q api urls", "")]))
          utilkit api          # all modules
          utilkit -q api urls
    """
    width = max((len(invocation) for invocation, _ in examples), default=0)
    lines = []
    for invocation, note in examples:
        line = f"  {invocation.ljust(width)}  # {note}" if note else f"  {invocation}"
        lines.append(line)
    return "\n".join(lines)


def _add_examples_option(cmd: click.Command, examples: Examples) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        pairs = examples() if callable(examples) else examples
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(render_examples(pairs))
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class UtilCommand(click.Command):
    """Click Command that accepts ``examples=`` and adds ``--examples``."""

    def __init__(self, *args: Any, examples: Examples | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class UtilGroup(click.Group):
    """Click Group with ``--examples``; its subcommands default to UtilCommand."""

    command_class = UtilCommand

    def __init__(self, *args: Any, examples: Examples | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
