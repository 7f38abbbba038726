"""Leaf constraint nodes.

Terminal schema fragments that carry only scalar constraints. A missing
constraint decodes to ``None`` and means "unconstrained", never zero.
The same leaf classes are reused in every grammar position that admits
them; which positions admit which leaves is decided by the unions in
:mod:`lexicon_ty.domain.fields`, :mod:`lexicon_ty.domain.endpoints` and
:mod:`lexicon_ty.domain.lexicon`.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, NonNegativeInt

from lexicon_ty.domain.base import LexiconNode
from lexicon_ty.domain.types import StringFormat

# Null field type is not part of the grammar.


class Boolean(LexiconNode):
    type: Literal["boolean"] = "boolean"
    description: str | None = None
    default: bool | None = None
    constant: bool | None = Field(default=None, alias="const")


class Integer(LexiconNode):
    type: Literal["integer"] = "integer"
    description: str | None = None
    minimum: int | None = None
    maximum: int | None = None
    default: int | None = None


class StringTy(LexiconNode):
    """String field. Lengths are in UTF-8 bytes, ``max_graphemes`` in grapheme clusters."""

    type: Literal["string"] = "string"
    description: str | None = None
    format: StringFormat | None = Field(default=None, strict=False)
    max_length: NonNegativeInt | None = None
    min_length: NonNegativeInt | None = None
    max_graphemes: NonNegativeInt | None = None
    # Suggested values, not a closed set.
    known_values: tuple[str, ...] | None = Field(default=None, strict=False)
    enum_values: tuple[str, ...] | None = Field(default=None, alias="enum", strict=False)
    default: str | None = None


class Bytes(LexiconNode):
    type: Literal["bytes"] = "bytes"
    description: str | None = None
    max_length: NonNegativeInt | None = None


class CidLink(LexiconNode):
    type: Literal["cid-link"] = "cid-link"
    description: str | None = None


class Token(LexiconNode):
    """Nominal marker type without a payload."""

    type: Literal["token"] = "token"
    description: str | None = None


class Blob(LexiconNode):
    """Reference to an externally stored binary object."""

    type: Literal["blob"] = "blob"
    description: str | None = None
    # Acceptable MIME types, may contain globs like ``image/*``.
    accept: tuple[str, ...] | None = Field(default=None, strict=False)
    max_size: NonNegativeInt | None = None


class Ref(LexiconNode):
    """Symbolic reference to another definition.

    ``reference`` is kept verbatim: ``#name`` for a local definition or
    ``nsid#name`` / ``nsid`` for a definition in another document. It is
    never resolved during decoding.
    """

    type: Literal["ref"] = "ref"
    description: str | None = None
    reference: str = Field(alias="ref")


class Union(LexiconNode):
    """Set of alternative reference targets.

    ``closed`` defaults to ``False``: an open union may receive values of
    types not listed in ``refs``.
    """

    type: Literal["union"] = "union"
    description: str | None = None
    closed: bool = False
    refs: tuple[str, ...] = Field(strict=False)


class Unknown(LexiconNode):
    """Catch-all for values of any shape."""

    type: Literal["unknown"] = "unknown"
    description: str | None = None
