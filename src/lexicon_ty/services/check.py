"""CheckService: conformance check over a tree of Lexicon documents.

Every discovered document must decode without error. A single failing
document fails the whole check; the result lists each failure with its
location so all of them can be fixed in one pass.

Files that cannot be read are listed with kind ``read_failed``. The
error code is ``DECODE_FAILED`` when any document failed to decode and
``READ_FAILED`` when every failure is a read error.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

from lexicon_ty.domain.decode import LexiconDecodeError, decode_lexicon
from lexicon_ty.infrastructure.filesystem import read_lexicon_file
from lexicon_ty.services.base import BaseService
from lexicon_ty.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _failure_message(undecodable: int, unreadable: int) -> str:
    parts = []
    if undecodable:
        noun = "document" if undecodable == 1 else "documents"
        parts.append(f"{undecodable} {noun} failed to decode")
    if unreadable:
        noun = "document" if unreadable == 1 else "documents"
        parts.append(f"{unreadable} {noun} could not be read")
    return ", ".join(parts)


class CheckService(BaseService):
    """Decodes every document under a path and reports failures."""

    def check(self, root: Path) -> ServiceResult:
        if not root.exists():
            return ServiceResult.failure(
                "check", "NOT_FOUND", f"No such path: {root}", path=str(root)
            )

        started = time.perf_counter()
        paths = self._find_documents(root)
        failures: list[dict[str, Any]] = []
        lexicon_ids: list[str] = []

        for path in paths:
            try:
                text = read_lexicon_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Cannot read %s: %s", path, exc)
                failures.append(
                    {"path": str(path), "location": "$", "kind": "read_failed", "message": str(exc)}
                )
                continue
            try:
                lexicon = decode_lexicon(text)
            except LexiconDecodeError as exc:
                failures.append(
                    {
                        "path": str(path),
                        "location": exc.location,
                        "kind": exc.kind,
                        "message": str(exc),
                    }
                )
                continue
            lexicon_ids.append(lexicon.id)

        data: dict[str, Any] = {
            "root": str(root),
            "files": len(paths),
            "decoded": len(lexicon_ids),
            "lexicons": lexicon_ids,
        }
        meta = {"duration_ms": round((time.perf_counter() - started) * 1000, 2)}

        if failures:
            logger.debug("%d of %d documents failed", len(failures), len(paths))
            unreadable = sum(1 for f in failures if f["kind"] == "read_failed")
            undecodable = len(failures) - unreadable
            return ServiceResult.failure(
                "check",
                "DECODE_FAILED" if undecodable else "READ_FAILED",
                _failure_message(undecodable, unreadable),
                data=data,
                failures=failures,
            )

        warnings: list[str] = []
        if not paths:
            warnings.append(f"No *{self._discovery.extension} documents found under {root}")
        return ServiceResult(ok=True, op="check", data=data, warnings=warnings, meta=meta)
