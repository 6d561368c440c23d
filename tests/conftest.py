"""Pytest configuration and fixtures for minigrep tests."""

from __future__ import annotations

import logging

import pytest

from minigrep.config.constants import (
    ENV_DATA_DIR,
    ENV_DIAGNOSTICS_STREAM,
    ENV_ENCODING,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
)

POEM = """\
Rust:
safe, fast, productive.
Pick three."""


@pytest.fixture(autouse=True)
def _isolate_minigrep_env(monkeypatch, tmp_path):
    """Force tests to use a temp MINIGREP_DATA_DIR and no ambient overrides."""
    for key in (ENV_DIAGNOSTICS_STREAM, ENV_ENCODING, ENV_LOG_FILE, ENV_LOG_LEVEL):
        monkeypatch.delenv(key, raising=False)
    data_dir = tmp_path / ".minigrep"
    (data_dir / "config").mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv(ENV_DATA_DIR, str(data_dir))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def poem() -> str:
    return POEM


@pytest.fixture
def poem_file(tmp_path, poem):
    """Write the sample poem to disk and return its path."""
    path = tmp_path / "poem.txt"
    path.write_text(poem + "\n", encoding="utf-8")
    return path


@pytest.fixture
def settings_dir(tmp_path):
    """Config directory that Settings.load reads by default."""
    return tmp_path / ".minigrep" / "config"
