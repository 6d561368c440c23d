"""Tests for minigrep.core.logging_config."""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from minigrep.core.logging_config import LogConfig, setup_logging, get_logger


class TestLogConfig:
    """Tests for LogConfig defaults."""

    def test_defaults(self):
        cfg = LogConfig()
        assert cfg.level == "WARNING"
        assert cfg.file_enabled is False
        assert cfg.file_backup_count == 3
        assert cfg.use_rich_console is True


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler_created(self, tmp_path):
        log_file = tmp_path / "logs" / "test.log"
        cfg = LogConfig(
            level="DEBUG",
            file_enabled=True,
            file_path=str(log_file),
            use_rich_console=False,
        )
        setup_logging(cfg)
        root = logging.getLogger()
        handler_types = [type(h) for h in root.handlers]
        assert RotatingFileHandler in handler_types
        assert root.level == logging.DEBUG
        assert log_file.parent.is_dir()

    def test_file_handler_disabled(self):
        setup_logging(LogConfig(use_rich_console=False))
        root = logging.getLogger()
        for h in root.handlers:
            assert not isinstance(h, RotatingFileHandler)

    def test_rich_console_handler_uses_stderr(self):
        setup_logging(LogConfig())
        root = logging.getLogger()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, RichHandler)
        assert handler.console.stderr is True

    def test_plain_console_handler_uses_stderr(self):
        setup_logging(LogConfig(use_rich_console=False))
        (handler,) = logging.getLogger().handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_replaces_existing_handlers(self):
        cfg = LogConfig(use_rich_console=False)
        setup_logging(cfg)
        setup_logging(cfg)
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:

    def test_returns_named_logger(self):
        logger = get_logger("minigrep.test")
        assert logger.name == "minigrep.test"
