"""Settings for the command line wrapper, sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .constants import CONTINUE_ON_ERROR_ENV, LOG_LEVEL_ENV


def env_bool(key: str, default: bool = False) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ExtractSettings:
    """Typed extraction settings.

    Command line flags take precedence; see `merged`.
    """

    continue_on_error: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ExtractSettings":
        return cls(
            continue_on_error=env_bool(CONTINUE_ON_ERROR_ENV, False),
            log_level=os.environ.get(LOG_LEVEL_ENV) or None,
        )

    def merged(self, continue_on_error: bool = False, log_level: Optional[str] = None) -> "ExtractSettings":
        """Return settings with explicit CLI values applied on top."""
        return ExtractSettings(
            continue_on_error=continue_on_error or self.continue_on_error,
            log_level=log_level or self.log_level,
        )


__all__ = ["ExtractSettings", "env_bool"]
