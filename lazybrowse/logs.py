"""Logging setup for the command-line front end.

The entry model never logs; only the presentation layer configures and
writes to loggers.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_HANDLER_TAG = "_lazybrowse_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """Immutable logging setup: level name, record format, and target stream."""

    level: str = "WARNING"
    fmt: str = "%(levelname)s | %(name)s | %(message)s"
    stream: TextIO | None = field(default=None, compare=False)


def resolve_level(name: str) -> int:
    """Map a level name to its ``logging`` constant, defaulting to WARNING."""
    return _LEVEL_MAP.get(str(name).strip().upper(), logging.WARNING)


def configure_logging(cfg: LoggingConfig, logger_name: str = "lazybrowse") -> logging.Logger:
    """Attach a single tagged stream handler to ``logger_name``.

    Repeated calls replace the previously tagged handler instead of stacking
    duplicates.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(cfg.stream if cfg.stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(cfg.fmt))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
    logger.setLevel(resolve_level(cfg.level))
    logger.propagate = False
    return logger
