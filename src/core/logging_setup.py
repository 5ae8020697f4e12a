# src/core/logging_setup.py
"""
Logging bootstrap for the CLI.

- Console handler on stderr at the requested level.
- Optional rotating file log when LOANCALC_LOG_FILE is set.
- Idempotent: calling twice (REPL/tests) does not duplicate handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "src"
LOG_FILE_ENV = "LOANCALC_LOG_FILE"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "(%Y-%m-%d %H:%M:%S)"


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Configure the package logger once and return it; later calls only adjust the level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_coerce_level(level))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    log_path = os.getenv(LOG_FILE_ENV, "").strip()
    if log_path:
        try:
            parent = os.path.dirname(log_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        except OSError as exc:
            # keep console logging; a bad log path must not stop a calculation
            logger.warning("File logging disabled (%s): %s", log_path, exc)

    return logger
