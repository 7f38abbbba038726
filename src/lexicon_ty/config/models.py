"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lexicon-ty.toml only contains
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_EXCLUDE: tuple[str, ...] = (".git", "node_modules", "__pycache__")


class DiscoveryConfig(BaseModel):
    """[discovery] section."""

    model_config = {"frozen": True}

    extension: str = ".json"
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    follow_symlinks: bool = False


class LexiconConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
