"""
Logging configuration using loguru.

The CLI calls setup_logging() once with the loaded Config; library modules
just use loguru directly.
"""

from __future__ import annotations

import sys

from loguru import logger

from bidsort.core.config import Config

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def setup_logging(config: Config | None = None, level: str | None = None) -> None:
    """
    Configure loguru from the ``logging`` section of a Config.

    Reads ``logging.level``, ``logging.file``, ``logging.rotation`` and
    ``logging.retention``. Loader warnings go to stderr; the optional file
    sink rotates.

    Args:
        config: Loaded configuration. Built-in defaults when None.
        level: Overrides ``logging.level`` (the CLI's ``--log-level``).
    """
    config = config or Config()
    level = (level or config.get("logging.level", "WARNING")).upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    log_file = config.get("logging.file")
    if log_file:
        logger.add(
            log_file,
            level=level,
            format=FILE_FORMAT,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )
        logger.debug(f"Logging to {log_file} at {level}")
