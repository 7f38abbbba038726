"""AppContext: shared state flowing through Click's command hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lexicon_ty.config.logging import configure_logging
from lexicon_ty.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from lexicon_ty.config.settings import LexiconSettings
    from lexicon_ty.services.result import ServiceResult


class AppContext:
    """Per-invocation context; subcommands receive it via ``@click.pass_obj``."""

    def __init__(self, settings: LexiconSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult and exit with its status.

        Success goes to stdout (warnings to stderr unless in JSON mode).
        Failure goes to stderr and exits with code 1.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
