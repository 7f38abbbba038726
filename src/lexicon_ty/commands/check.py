"""Command: decode every Lexicon document under a path."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from lexicon_ty.commands._base import LexCommand

if TYPE_CHECKING:
    from lexicon_ty.commands._context import AppContext


@click.command(
    cls=LexCommand,
    examples="""\
  lexicon-ty check
  lexicon-ty check lexicons/
  lexicon-ty --json check lexicons/com/atproto
  lexicon-ty check --extension .lex.json schemas/""",
)
@click.argument("path", type=click.Path(path_type=Path), default=".")
@click.option("--extension", default=None, help="Document file extension (default from config).")
@click.pass_obj
def check(app: AppContext, path: Path, extension: str | None) -> None:
    """Decode all documents under PATH; fail if any does not conform."""
    from lexicon_ty.services.check import CheckService

    discovery = app.settings.discovery
    if extension is not None:
        discovery = discovery.model_copy(update={"extension": extension})
    app.emit(CheckService(discovery).check(path))
