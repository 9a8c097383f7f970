"""Shared pytest fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def app_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data directories at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Create an initialized database in a temporary directory."""
    from pockettrack.store.schema import init_database

    path = tmp_path / "pockettrack.db"
    init_database(path)
    return path
