"""InspectService: summarize a single Lexicon document."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from lexicon_ty.domain.decode import LexiconDecodeError, decode_lexicon
from lexicon_ty.domain.endpoints import Procedure, Query, Record, Subscription
from lexicon_ty.domain.lexicon import Def
from lexicon_ty.infrastructure.filesystem import read_lexicon_file
from lexicon_ty.services.base import BaseService
from lexicon_ty.services.result import ServiceResult


def _summarize_def(node: Def) -> dict[str, Any]:
    summary: dict[str, Any] = {"type": node.type}
    if node.description:
        summary["description"] = node.description
    if isinstance(node, Record):
        summary["key"] = node.key
        summary["required"] = list(node.record.required or ())
    elif isinstance(node, Query):
        summary["output"] = node.output.encoding if node.output else None
    elif isinstance(node, Procedure):
        summary["input"] = node.input.encoding if node.input else None
        summary["output"] = node.output.encoding if node.output else None
    elif isinstance(node, Subscription):
        summary["message_refs"] = list(node.message.schema_.refs) if node.message else []

    if isinstance(node, (Query, Procedure, Subscription)) and node.errors:
        summary["errors"] = [err.name for err in node.errors]
    return summary


class InspectService(BaseService):
    """Decodes one document and reports what it defines."""

    def describe(self, path: Path) -> ServiceResult:
        if not path.is_file():
            return ServiceResult.failure(
                "describe", "NOT_FOUND", f"No such file: {path}", path=str(path)
            )
        try:
            text = read_lexicon_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure("describe", "READ_FAILED", str(exc), path=str(path))
        try:
            lexicon = decode_lexicon(text)
        except LexiconDecodeError as exc:
            return ServiceResult.failure(
                "describe",
                "DECODE_FAILED",
                str(exc),
                path=str(path),
                location=exc.location,
                kind=exc.kind,
            )

        return ServiceResult(
            ok=True,
            op="describe",
            data={
                "path": str(path),
                "id": lexicon.id,
                "lexicon": lexicon.lexicon,
                "description": lexicon.description,
                "defs": {name: _summarize_def(node) for name, node in lexicon.defs.items()},
            },
        )
