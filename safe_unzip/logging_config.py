"""Central logging configuration utilities for safe_unzip.

Library modules only obtain loggers; configuring handlers is left to the
caller (the `safe-unzip` CLI calls `configure_logging` on startup).
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .constants import LOG_LEVEL_ENV

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

DEFAULT_LEVEL = "WARNING"


def resolve_level(level: str | int | None = None) -> int:
    """Resolve a level name or number.

    Order of precedence:
    1. Explicit `level` argument if given
    2. Environment variable `SAFE_UNZIP_LOG_LEVEL`
    3. Fallback to `WARNING`
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    return _LEVEL_MAP.get(level.strip().upper(), logging.WARNING)


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure the root logger for command line use."""
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "safe_unzip")


__all__ = ["configure_logging", "get_logger", "resolve_level"]
