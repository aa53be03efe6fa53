"""AppContext: the object every utilkit command receives.

Created once by the root CLI group and passed down with ``@click.pass_obj``.
It holds the settings, builds the services on first use, and turns their
results into output and an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from utilkit.config.settings import UtilkitSettings
    from utilkit.services.api import ApiService
    from utilkit.services.dates import DateService
    from utilkit.services.result import ServiceResult

# Service errors all name a bad argument or option.
USAGE_EXIT_CODE = 2


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Services are created lazily, so ``--help`` and ``--examples`` never
    import them or introspect the helper modules.
    """

    def __init__(self, settings: UtilkitSettings) -> None:
        self.settings = settings
        self._api: ApiService | None = None
        self._dates: DateService | None = None

        from utilkit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def api(self) -> ApiService:
        """Export listing for ``utilkit api``."""
        if self._api is None:
            from utilkit.services.api import ApiService

            self._api = ApiService(self.settings)
        return self._api

    @property
    def dates(self) -> DateService:
        """Date formatting for ``utilkit format-date``."""
        if self._dates is None:
            from utilkit.services.dates import DateService

            self._dates = DateService(self.settings)
        return self._dates

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit non-zero if it failed.

        * Success: output goes to stdout.  Warnings such as an unparseable
          date go to stderr so piped output stays clean.
        * Failure: output goes to stderr, followed by a hint on fixing the
          invocation unless ``--json`` or ``--quiet`` is set, then the
          process exits with status 2.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        plain = not (output_settings.json_output or output_settings.quiet)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not output_settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return

        click.echo(output, err=True)
        if plain and result.error is not None:
            click.echo(f"Hint: {result.error.hint}", err=True)
        raise SystemExit(USAGE_EXIT_CODE)
