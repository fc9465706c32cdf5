# tests/conftest.py
from __future__ import annotations

import pytest

from ratio import runtime


@pytest.fixture(autouse=True)
def _isolated_workspace(tmp_path, monkeypatch):
    """Point the workspace at an empty temp dir and start from a fresh runtime."""
    monkeypatch.setenv("RATIO_HOME", str(tmp_path / "home"))
    runtime.reset()
    yield
    runtime.reset()


@pytest.fixture
def write_settings(tmp_path):
    def _write(text: str, name: str = "settings.toml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
