"""Rich Console factory and theme for utilkit output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UTILKIT_THEME = Theme(
    {
        "uk.ok": "bold green",
        "uk.error": "bold red",
        "uk.warning": "bold yellow",
        "uk.op": "bold cyan",
        "uk.key": "dim",
        "uk.module": "bold blue",
        "uk.name": "bold",
        "uk.signature": "dim",
        "uk.kind.function": "green",
        "uk.kind.async": "cyan",
        "uk.kind.class": "magenta",
        "uk.kind.constant": "yellow",
    }
)

_KIND_STYLES: dict[str, str] = {
    "function": "uk.kind.function",
    "async function": "uk.kind.async",
    "class": "uk.kind.class",
    "constant": "uk.kind.constant",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=UTILKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for an export kind."""
    return _KIND_STYLES.get(kind, "")
