"""Shared pytest fixtures for lexicon-ty tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "lexicons"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixtures_dir() -> Path:
    """The reference corpus of valid documents (read-only)."""
    return FIXTURES_DIR


@pytest.fixture
def lexicon_dir(tmp_path: Path) -> Path:
    """Writable copy of the reference corpus."""
    target = tmp_path / "lexicons"
    shutil.copytree(FIXTURES_DIR, target)
    return target


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point config discovery at a missing file so no ambient TOML is read."""
    monkeypatch.setenv("LEXICON_TY_CONFIG", str(tmp_path / "absent.toml"))
    for name in ("LEXICON_TY_JSON_OUTPUT", "LEXICON_TY_QUIET", "LEXICON_TY_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
