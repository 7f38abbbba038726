"""Discovery and reading of Lexicon documents on disk."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from lexicon_ty.config.models import DEFAULT_EXCLUDE


def _has_extension(path: Path, extension: str) -> bool:
    return len(path.name) > len(extension) and path.name.endswith(extension)


def find_lexicon_files(
    root: Path,
    *,
    extension: str = ".json",
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
    follow_symlinks: bool = False,
) -> list[Path]:
    """Recursively list document files under *root*, sorted.

    Directories whose name is in *exclude* are not entered. When *root*
    is itself a file it is returned if it carries *extension*. The
    extension is matched against the whole file name, so compound
    extensions such as ``.lex.json`` work; a missing leading dot is added.
    """
    if not extension.startswith("."):
        extension = f".{extension}"
    if root.is_file():
        return [root] if _has_extension(root, extension) else []
    if not root.is_dir():
        return []

    skip = frozenset(exclude)
    results: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=follow_symlinks):
        dirnames[:] = [d for d in dirnames if d not in skip]
        base = Path(dirpath)
        for name in filenames:
            path = base / name
            if _has_extension(path, extension) and path.is_file():
                results.append(path)
    return sorted(results)


def read_lexicon_file(path: Path) -> str:
    """Read a document as UTF-8 text."""
    return path.read_text(encoding="utf-8")
