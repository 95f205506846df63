"""Logging setup for PixelChart.

Layout and render steps log at DEBUG with structured ``extra=`` fields. Those
land in a rotating JSON file; the console stays at the requested level and
switches to JSON with ``--json-logs``.
"""

import logging
import logging.config
import os
from typing import Any

PACKAGE_LOGGER = "pixelchart"
LOG_FILE_NAME = "pixelchart.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

_FORMATTERS: dict[str, dict[str, Any]] = {
    "json": {
        "()": "pythonjsonlogger.json.JsonFormatter",
        "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        "rename_fields": {"levelname": "level", "name": "logger"},
    },
    "plain": {
        "format": "%(levelname)-7s %(name)s: %(message)s",
    },
}


def build_logging_config(
    json_output: bool = False, log_level: str = "INFO", log_dir: str | None = "logs"
) -> dict[str, Any]:
    """Return a dictConfig mapping for the package logger.

    Args:
        json_output: Emit console records as JSON instead of plain text
        log_level: Level name for the console and the package logger
        log_dir: Directory for the rotating JSON file, or None for console only
    """
    level = (log_level or "INFO").upper()
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "json" if json_output else "plain",
            "stream": "ext://sys.stderr",
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": os.path.join(log_dir, LOG_FILE_NAME),
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUPS,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {name: dict(spec) for name, spec in _FORMATTERS.items()},
        "handlers": handlers,
        "loggers": {
            PACKAGE_LOGGER: {
                # The file handler wants DEBUG even when the console does not.
                "level": "DEBUG" if log_dir is not None else level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }


def setup_logging(
    json_output: bool = False, log_level: str = "INFO", log_dir: str | None = "logs"
) -> None:
    """Install the package logging configuration."""
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(json_output, log_level, log_dir))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Example:
        logger = get_logger(__name__)
        logger.debug("Canvas box resolved", extra={"width": 640, "height": 480})
    """
    return logging.getLogger(name)
