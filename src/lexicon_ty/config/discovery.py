"""Locate and load ``lexicon-ty.toml``.

The file is searched for in the starting directory and each of its
ancestors, nearest first. ``LEXICON_TY_CONFIG`` pins an explicit file
and disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from lexicon_ty.config.models import LexiconConfig

CONFIG_FILENAME = "lexicon-ty.toml"
CONFIG_ENV_VAR = "LEXICON_TY_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file at or above *start* (default: cwd)."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> LexiconConfig:
    """Parse *path* (or the discovered file) into a :class:`LexiconConfig`.

    Falls back to the baked-in defaults when there is no file.
    """
    source = path if path is not None else find_config(cwd)
    if source is None:
        return LexiconConfig()
    with source.open("rb") as fh:
        return LexiconConfig.model_validate(tomllib.load(fh))
