"""
Logging for the lazyscroll service.

Everything logs under the ``lazyscroll`` namespace:
    import logging
    logger = logging.getLogger(__name__)

``setup_logging`` attaches a stdout handler and, when a log directory is
given, a rotating file handler. The app factory, the server entrypoint
and the seed CLI all call it; each call replaces the handlers installed
by the previous one.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from lazyscroll.config.settings import LoggingSettings

LOGGER_NAME = "lazyscroll"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int) -> int:
    """Turn "debug", "INFO" or 10 into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    settings: LoggingSettings | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """
    Configure the ``lazyscroll`` logger from settings and return it.

    Args:
        settings: Level and file options. Defaults to ``LoggingSettings()``.
        log_dir: Directory for the rotating log file. Console only if None.
    """
    settings = settings or LoggingSettings()
    level = resolve_level(settings.level)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if settings.to_file and log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / settings.log_file,
                maxBytes=settings.max_bytes,
                backupCount=settings.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            package_logger.warning("Could not set up file logging: %s", e)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    return package_logger
