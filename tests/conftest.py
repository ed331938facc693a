from __future__ import annotations

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point settings at a throwaway directory and clear log overrides."""

    home = tmp_path / "sizhu-home"
    monkeypatch.setenv("SIZHU_HOME", str(home))
    monkeypatch.delenv("SIZHU_LOG_LEVEL", raising=False)
    return home


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo ``configure_logging`` calls made by the CLI callback."""

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
