"""Composite nodes and the per-position field unions.

Each ``*Schema`` alias below is a closed, ``type``-discriminated union
listing exactly the node kinds legal at one grammar position:

- ``FieldSchema``: object properties.
- ``ItemsSchema``: array elements (no nested arrays, no bytes or blobs).
- ``ParamSchema``: query parameters (booleans, integers, strings and
  arrays of strings only).
- ``ParamItemsSchema``: parameter array elements (strings only).

INVARIANT: these unions are never merged into one "any node" type.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, NonNegativeInt

from lexicon_ty.domain.base import LexiconNode
from lexicon_ty.domain.primitives import (
    Blob,
    Boolean,
    Bytes,
    CidLink,
    Integer,
    Ref,
    StringTy,
    Union,
    Unknown,
)

ItemsSchema = Annotated[
    CidLink | Integer | Ref | StringTy | Union | Unknown,
    Field(discriminator="type"),
]


class Array(LexiconNode):
    type: Literal["array"] = "array"
    description: str | None = None
    items: ItemsSchema
    min_length: NonNegativeInt | None = None
    max_length: NonNegativeInt | None = None


FieldSchema = Annotated[
    Boolean | Integer | StringTy | Bytes | CidLink | Array | Blob | Ref | Union | Unknown,
    Field(discriminator="type"),
]


def can_be_reference(schema: FieldSchema) -> bool:
    """Whether a property of this kind may hold a reference to another entity.

    Only plain strings qualify (identifiers, URIs). ``ref`` and ``union``
    properties embed values rather than point at them and are not counted.
    """
    return isinstance(schema, StringTy)


class Object(LexiconNode):
    """Object with named properties.

    Names listed in ``required`` / ``nullable`` are not checked against
    ``properties``; callers that need that guarantee must verify it.
    """

    type: Literal["object"] = "object"
    description: str | None = None
    properties: dict[str, FieldSchema]
    required: tuple[str, ...] | None = Field(default=None, strict=False)
    nullable: tuple[str, ...] | None = Field(default=None, strict=False)

    def is_required(self, name: str) -> bool:
        if self.required is None:
            return False
        return name in self.required

    def is_nullable(self, name: str) -> bool:
        if self.nullable is None:
            return False
        return name in self.nullable

    def has_reference_field(self) -> bool:
        return any(can_be_reference(schema) for schema in self.properties.values())


# --- Query parameters ---


ParamItemsSchema = Annotated[StringTy, Field(discriminator="type")]


class ParamArray(LexiconNode):
    type: Literal["array"] = "array"
    description: str | None = None
    items: ParamItemsSchema
    min_length: NonNegativeInt | None = None
    max_length: NonNegativeInt | None = None


ParamSchema = Annotated[
    Boolean | Integer | StringTy | ParamArray,
    Field(discriminator="type"),
]


class Params(LexiconNode):
    """HTTP query parameters of a query or subscription.

    ``ty`` holds the raw ``type`` key (``"params"`` in practice).
    """

    ty: str = Field(alias="type")
    required: tuple[str, ...] | None = Field(default=None, strict=False)
    properties: dict[str, ParamSchema]

    def is_required(self, name: str) -> bool:
        if self.required is None:
            return False
        return name in self.required
