"""Root CLI group: global output flags, config selection, and subcommands."""

from __future__ import annotations

import click

from utilkit import __version__
from utilkit.commands import register_commands
from utilkit.commands._base import Example, UtilGroup
from utilkit.commands._context import AppContext
from utilkit.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from utilkit.config.settings import UtilkitSettings

EXAMPLES: list[Example] = [
    ("utilkit api", "list every exported helper"),
    ("utilkit format-date 2023-10-01T15:30:00Z", "format with the [format] defaults"),
    ("utilkit -c ./ci.toml format-date 0", "read defaults from another config file"),
    ("UTILKIT_FORMAT__LOCALE=fr-FR utilkit format-date 0", "override one setting"),
]


@click.group(cls=UtilGroup, invoke_without_command=True, examples=EXAMPLES)
@click.version_option(version=__version__, prog_name="utilkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only names or the formatted value.")
@click.option("-v", "--verbose", is_flag=True, help="Add summaries, inputs, and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Config file to read instead of the nearest {CONFIG_FILENAME} or ${CONFIG_ENV_VAR}.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """utilkit: inspect and try the helper library from the shell."""
    settings = UtilkitSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
