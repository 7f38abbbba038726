"""Shared pydantic configuration for every Lexicon node.

INVARIANT: Decoding is maximally strict. Unknown keys are rejected,
values are never coerced, and only the wire (camelCase / aliased) key
names are accepted. Decoded nodes are frozen.

JSON arrays decode to tuples. Sequence fields relax strictness on the
container only (``Field(strict=False)``) so a list from parsed JSON is
accepted; their elements stay strict. JSON objects decode to plain dicts
(``Lexicon.defs``, ``Object.properties``, ``Params.properties``) which
callers must treat as read-only.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class LexiconNode(BaseModel):
    """Base class for all decoded schema nodes."""

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "strict": True,
        "alias_generator": to_camel,
    }
