"""Strict decoder: raw JSON text or parsed data to a validated Lexicon.

All failure modes (unknown key, missing key, repeated key, wrong value shape,
unmatched ``type`` tag, malformed JSON) surface as one
:class:`LexiconDecodeError`. No partial result is ever returned.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from lexicon_ty.domain.lexicon import Def, Lexicon

logger = logging.getLogger(__name__)

_DEF_ADAPTER: TypeAdapter[Def] = TypeAdapter(Def)

# Longest repr of an offending scalar quoted in error messages.
_MAX_FOUND_LEN = 60


def _describe_found(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    text = repr(value)
    if len(text) > _MAX_FOUND_LEN:
        text = text[: _MAX_FOUND_LEN - 3] + "..."
    return text


def format_location(path: tuple[str | int, ...]) -> str:
    """Render a document path as ``$.defs.main.errors[0].name``."""
    parts = ["$"]
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f".{segment}")
    return "".join(parts)


def document_path(loc: tuple[str | int, ...], document: Any) -> tuple[str | int, ...]:
    """Drop the union tag steps pydantic inserts into an error location.

    Validation locations name the selected variant (``defs.main.query.output``)
    where the document itself has no such key. Walking the input alongside
    the location tells the two apart.
    """
    path: list[str | int] = []
    node = document
    # A record def holds its schema under ``record``: the tag step and the
    # key step share a name, so at most one tag is skipped per node.
    tag_open = True
    for segment in loc:
        if tag_open and isinstance(node, dict) and node.get("type") == segment:
            tag_open = False
            continue
        tag_open = True
        path.append(segment)
        if isinstance(node, dict) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and segment < len(node):
            node = node[segment]
        else:
            node = None
    return tuple(path)


class LexiconDecodeError(ValueError):
    """A document does not conform to the Lexicon grammar.

    Attributes:
        path: Keys and indices from the document root to the mismatch.
            Empty for whole-document failures such as bad JSON syntax.
        expected: Description of the shape that was expected.
        found: The offending input value, when one is available.
        kind: Validator error type (``extra_forbidden``, ``missing``,
            ``union_tag_invalid``, ``json_invalid``, ...).
        error_count: Number of problems found in the document.
    """

    def __init__(
        self,
        expected: str,
        *,
        path: tuple[str | int, ...] = (),
        found: Any = None,
        kind: str = "invalid",
        error_count: int = 1,
    ) -> None:
        self.path = path
        self.expected = expected
        self.found = found
        self.kind = kind
        self.error_count = error_count
        super().__init__(self._render())

    @property
    def location(self) -> str:
        return format_location(self.path)

    def _render(self) -> str:
        msg = f"{self.location}: {self.expected}"
        if self.kind not in ("missing", "json_invalid") and self.found is not None:
            msg += f" (found {_describe_found(self.found)})"
        if self.error_count > 1:
            msg += f" [+{self.error_count - 1} more]"
        return msg

    @classmethod
    def from_validation_error(
        cls,
        exc: ValidationError,
        document: Any = None,
    ) -> LexiconDecodeError:
        """Reduce a pydantic ValidationError to its first problem.

        *document* is the decoded input, used to map the validator's
        location back onto document keys.
        """
        errors = exc.errors(include_url=False)
        first = errors[0]
        loc = tuple(first["loc"])
        return cls(
            first["msg"],
            path=document_path(loc, document) if document is not None else loc,
            found=first.get("input"),
            kind=first["type"],
            error_count=len(errors),
        )


class _KeyTracker:
    """``object_pairs_hook`` that builds plain dicts and records repeated keys."""

    def __init__(self) -> None:
        self.duplicates: list[tuple[dict[str, Any], str]] = []

    def __call__(self, pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        for key, value in pairs:
            if key in obj:
                self.duplicates.append((obj, key))
            obj[key] = value
        return obj


def _path_to(
    target: Any, node: Any, path: tuple[str | int, ...] = ()
) -> tuple[str | int, ...] | None:
    if node is target:
        return path
    if isinstance(node, dict):
        children: Any = node.items()
    elif isinstance(node, list):
        children = enumerate(node)
    else:
        return None
    for key, child in children:
        found = _path_to(target, child, (*path, key))
        if found is not None:
            return found
    return None


def _log_failure(error: LexiconDecodeError) -> LexiconDecodeError:
    logger.debug("Decode failed at %s (%s)", error.location, error.kind)
    return error


def _parse_json(text: str | bytes) -> Any:
    tracker = _KeyTracker()
    try:
        document = json.loads(text, object_pairs_hook=tracker)
    except ValueError as exc:
        error = LexiconDecodeError(f"Invalid JSON: {exc}", kind="json_invalid")
        raise _log_failure(error) from exc
    if tracker.duplicates:
        obj, key = tracker.duplicates[0]
        parent = _path_to(obj, document) or ()
        raise _log_failure(
            LexiconDecodeError(
                f"Duplicate key {key!r}",
                path=(*parent, key),
                kind="duplicate_key",
                error_count=len(tracker.duplicates),
            )
        )
    return document


def decode_lexicon(text: str | bytes) -> Lexicon:
    """Decode a Lexicon document from JSON text.

    A key repeated within one JSON object is rejected rather than letting
    the last value win.

    Raises:
        LexiconDecodeError: If the text is not valid JSON or does not
            match the grammar exactly.
    """
    return decode_lexicon_data(_parse_json(text))


def decode_lexicon_data(data: Any) -> Lexicon:
    """Decode a Lexicon document from already-parsed JSON data."""
    try:
        lexicon = Lexicon.model_validate(data)
    except ValidationError as exc:
        raise _log_failure(LexiconDecodeError.from_validation_error(exc, data)) from exc
    logger.debug("Decoded lexicon %s with %d defs", lexicon.id, len(lexicon.defs))
    return lexicon


def decode_def(data: Any) -> Def:
    """Decode a single definition node, dispatching on its ``type`` tag."""
    try:
        return _DEF_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise _log_failure(LexiconDecodeError.from_validation_error(exc, data)) from exc
