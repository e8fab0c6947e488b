"""Logging configuration shared by the pantry entry points."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_APP_LOGGERS = ("pantry", "pantry_auth", "pantry_config")
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")


def configure_logging(level: str | int = "INFO") -> None:
    """Configure application logging.

    Sets up console output with timestamps and module names, applies
    ``level`` to the pantry loggers and keeps third-party loggers at WARNING.
    """
    if isinstance(level, str):
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        log_level = level

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in _APP_LOGGERS:
        logging.getLogger(name).setLevel(log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
