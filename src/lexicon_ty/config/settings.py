"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Click
  2. Env vars     - ``LEXICON_TY_*`` prefix, ``__`` for nested sections
  3. TOML file    - ``lexicon-ty.toml`` found by walk-up
  4. Code defaults - baked into :mod:`lexicon_ty.config.models`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from lexicon_ty.config.discovery import find_config
from lexicon_ty.config.models import DiscoveryConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single ``lexicon-ty.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is chosen per construction, so it is handed to
# settings_customise_sources (a classmethod) through thread-local state.
_pending = threading.local()


class LexiconSettings(BaseSettings):
    """Settings for the ``lexicon-ty`` CLI.

    Attributes:
        config_path: The TOML file in effect, or None when running on defaults.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LEXICON_TY_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> LexiconSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* wins over discovery from *start* (default: cwd).
        A *config_path* that does not exist is ignored.
        """
        toml_path: Path | None
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None
