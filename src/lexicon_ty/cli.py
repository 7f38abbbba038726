"""``lexicon-ty`` entry point: global output flags, then check/describe."""

from __future__ import annotations

import click

from lexicon_ty import __version__
from lexicon_ty.commands import register_commands
from lexicon_ty.commands._context import AppContext
from lexicon_ty.config.settings import LexiconSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Settings are read from the nearest lexicon-ty.toml and LEXICON_TY_* variables.",
)
@click.version_option(version=__version__, prog_name="lexicon-ty")
@click.option("--json", "json_output", is_flag=True, help="Print the raw result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only an OK/ERROR status line.")
@click.option("-v", "--verbose", is_flag=True, help="Show per-document detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="FILE",
    help="Read settings from FILE instead of searching for lexicon-ty.toml.",
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
    """Decode Lexicon schema documents and report every grammar violation.

    A document passes only if it matches the grammar exactly. Unknown or
    repeated keys fail it, as does a ``type`` tag that is not legal where
    it appears.
    """
    settings = LexiconSettings.from_cli(
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
