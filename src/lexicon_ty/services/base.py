"""BaseService: shared construction for lexicon-ty services."""

from __future__ import annotations

from pathlib import Path

from lexicon_ty.config.models import DiscoveryConfig
from lexicon_ty.infrastructure.filesystem import find_lexicon_files


class BaseService:
    """Base for service classes.

    Every service receives the ``[discovery]`` settings that decide which
    files count as documents.
    """

    def __init__(self, discovery: DiscoveryConfig | None = None) -> None:
        self._discovery = discovery or DiscoveryConfig()

    def _find_documents(self, root: Path) -> list[Path]:
        return find_lexicon_files(
            root,
            extension=self._discovery.extension,
            exclude=self._discovery.exclude,
            follow_symlinks=self._discovery.follow_symlinks,
        )
