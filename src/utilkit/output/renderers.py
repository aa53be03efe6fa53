"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from utilkit.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from utilkit.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_exports":
        return "\n".join(
            f"{module['module']}.{export['name']}"
            for module in result.data.get("modules", [])
            for export in module["exports"]
        )
    if "formatted" in result.data:
        return str(result.data["formatted"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="uk.ok")
    op = Text(f"  {result.op}", style="uk.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="uk.key")
    console.print(k, Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _export_table(exports: list[dict[str, str]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for the exports of one module."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="uk.name", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Signature", style="uk.signature")
    if verbose:
        table.add_column("Summary")

    for export in exports:
        row = [
            Text(export["name"]),
            Text(export["kind"], style=style_for_kind(export["kind"])),
            Text(export["signature"]),
        ]
        if verbose:
            row.append(Text(export["summary"]))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="uk.error")
    op = Text(f"  {result.op}", style="uk.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_exports(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_exports: one table per core module."""
    _status_line(console, result)
    for module in result.data.get("modules", []):
        console.print()
        console.print(Text(f"  {module['module']}", style="uk.module"))
        console.print(_export_table(module["exports"], verbose=verbose))
    if verbose:
        _render_meta(console, result)


def _render_formatted(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render format_date: the formatted text, plus inputs when verbose."""
    _status_line(console, result)
    _field(console, "formatted", result.data.get("formatted"))
    if verbose:
        for key in ("input", "utc", "locale", "time_zone"):
            if key in result.data:
                _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_exports": _render_exports,
    "format_date": _render_formatted,
}
