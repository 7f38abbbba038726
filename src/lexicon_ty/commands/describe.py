"""Command: summarize one Lexicon document."""

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
  lexicon-ty describe lexicons/app/bsky/feed/post.json
  lexicon-ty --json describe lexicons/com/atproto/repo/createRecord.json""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def describe(app: AppContext, path: Path) -> None:
    """List the definitions declared in the document at PATH."""
    from lexicon_ty.services.inspect import InspectService

    app.emit(InspectService(app.settings.discovery).describe(path))
