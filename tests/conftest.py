"""Pytest configuration shared by the exporter test suites."""

import pytest


@pytest.fixture(autouse=True)
def isolated_prefs(tmp_path, monkeypatch):
    """Keep preference reads and writes away from the real home directory."""
    path = tmp_path / "prefs" / "config.json"
    monkeypatch.setenv("TABHTML_CONFIG_PATH", str(path))
    monkeypatch.delenv("TABHTML_OPEN", raising=False)
    return path
