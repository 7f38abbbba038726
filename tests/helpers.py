"""Test helpers shared across test modules."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_document(directory: Path, name: str, document: Any) -> Path:
    """Serialize *document* as JSON into *directory*/*name*."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def minimal_lexicon(main: dict[str, Any], *, nsid: str = "com.example.test") -> dict[str, Any]:
    """A one-def document with *main* as its ``main`` definition."""
    return {"lexicon": 1, "id": nsid, "defs": {"main": main}}
