"""Shared pytest fixtures for the nsorder test-suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from nsorder.config.config import Config
from nsorder.config.paths import CONFIG_PATH_ENV
from nsorder.features.ordering import default_trie_cache
from nsorder.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset shared state."""

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))
    Config.reset()
    default_trie_cache.clear()

    try:
        yield config_file
    finally:
        Config.reset()
        default_trie_cache.clear()
        _ = setup_logger(log_file=None, console_level=logging.WARNING)


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import nsorder.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path
