"""Shared fixtures for hot-config tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import hot_config
import pytest


@pytest.fixture(autouse=True)
def clean_store(monkeypatch):
    """Start every test with an empty store and no APP_ENV."""
    monkeypatch.delenv("APP_ENV", raising=False)
    hot_config.clear()
    yield
    hot_config.clear()


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for config trees."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_tree(tmp_dir):
    """Return a helper writing files (relative path -> text) under a named subdirectory."""

    def _make_tree(name: str, files: dict[str, str]) -> Path:
        root = tmp_dir / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, text in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make_tree
