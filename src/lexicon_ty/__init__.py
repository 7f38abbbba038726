"""lexicon-ty: strict typed model of Lexicon schema documents."""

from __future__ import annotations

from lexicon_ty.domain.decode import LexiconDecodeError, decode_lexicon, decode_lexicon_data
from lexicon_ty.domain.lexicon import Def, Lexicon

__version__ = "0.1.0"

__all__ = [
    "Def",
    "Lexicon",
    "LexiconDecodeError",
    "__version__",
    "decode_lexicon",
    "decode_lexicon_data",
]
