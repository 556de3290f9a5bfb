"""Shared test fixtures for the text-diff suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def write_file(tmp_path):
    """Write raw text to a file under tmp_path and return its path."""
    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def isolated_settings(tmp_path):
    """Settings manager writing to a temporary file."""
    from textdiff.services.settings import SettingsManager

    return SettingsManager(tmp_path / "config" / "settings.json")


@pytest.fixture(scope="session")
def qcore_app():
    """A QCoreApplication so workers can be created without a display."""
    qtcore = pytest.importorskip("PyQt6.QtCore")
    app = qtcore.QCoreApplication.instance()
    if app is None:
        app = qtcore.QCoreApplication([])
    return app
