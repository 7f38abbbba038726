"""Subcommand modules for lexicon-ty.

register_commands() imports each command lazily so ``--help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every standalone command to the root group."""
    from lexicon_ty.commands.check import check
    from lexicon_ty.commands.describe import describe

    cli.add_command(check)
    cli.add_command(describe)
