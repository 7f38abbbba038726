"""The Lexicon document and its definition dispatch."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from lexicon_ty.domain.base import LexiconNode
from lexicon_ty.domain.endpoints import Procedure, Query, Record, Subscription
from lexicon_ty.domain.fields import Array, Object
from lexicon_ty.domain.primitives import StringTy, Token
from lexicon_ty.domain.types import DefType

MAIN_DEF = "main"

# The version number is an unsigned 32-bit integer on the wire.
MAX_LEXICON_VERSION = 2**32 - 1

Def = Annotated[
    Query | Procedure | Subscription | Record | StringTy | Token | Object | Array,
    Field(discriminator="type"),
]


class Lexicon(LexiconNode):
    """A decoded schema document.

    Attributes:
        lexicon: Schema language version.
        id: NSID naming this document.
        description: Optional overview.
        defs: Definitions by name. References between them stay symbolic.
            Treat the mapping as read-only.
    """

    lexicon: int = Field(ge=0, le=MAX_LEXICON_VERSION)
    id: str
    description: str | None = None
    defs: dict[str, Def]

    @property
    def main(self) -> Def | None:
        """The ``main`` definition, which the bare NSID refers to."""
        return self.defs.get(MAIN_DEF)

    def def_types(self) -> dict[str, DefType]:
        """Map each definition name to its ``type`` tag."""
        return {name: DefType(node.type) for name, node in self.defs.items()}
