"""Tests for the package logger setup."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from lazyscroll.config.logging_config import LOGGER_NAME, resolve_level, setup_logging
from lazyscroll.config.settings import LoggingSettings


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger(LOGGER_NAME)
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(saved_level)


def _file_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]


class TestResolveLevel:
    @pytest.mark.parametrize("raw,expected", [("DEBUG", 10), ("warning", 30), (" info ", 20), (40, 40)])
    def test_known_levels(self, raw, expected):
        assert resolve_level(raw) == expected

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")


class TestSetupLogging:
    def test_level_comes_from_settings(self):
        package_logger = setup_logging(LoggingSettings(level="WARNING"))
        assert package_logger.name == "lazyscroll"
        assert package_logger.level == logging.WARNING

    def test_console_only_without_log_dir(self):
        package_logger = setup_logging(LoggingSettings())
        assert len(package_logger.handlers) == 1
        assert _file_handlers(package_logger) == []

    def test_repeated_calls_replace_handlers(self, tmp_path: Path):
        setup_logging(LoggingSettings(), log_dir=tmp_path)
        package_logger = setup_logging(LoggingSettings(level="DEBUG"), log_dir=tmp_path)
        assert len(package_logger.handlers) == 2
        assert package_logger.level == logging.DEBUG

    def test_writes_rotating_file(self, tmp_path: Path):
        settings = LoggingSettings(log_file="test.log", max_bytes=2048, backup_count=2)
        package_logger = setup_logging(settings, log_dir=tmp_path / "logs")

        (handler,) = _file_handlers(package_logger)
        assert handler.maxBytes == 2048
        assert handler.backupCount == 2

        logging.getLogger("lazyscroll.storage.item_store").info("inserted 3 items")
        handler.flush()
        assert "inserted 3 items" in (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")

    def test_file_logging_can_be_disabled(self, tmp_path: Path):
        package_logger = setup_logging(LoggingSettings(to_file=False), log_dir=tmp_path)
        assert _file_handlers(package_logger) == []
        assert not (tmp_path / "lazyscroll.log").exists()
