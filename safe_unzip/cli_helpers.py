"""Shared CLI helpers for safe-unzip."""

import sys
from typing import Optional

from .constants import ExitCodes
from .errors import ArchiveOpenError, ExtractionError, InvalidPathError


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to safe-unzip exit codes."""
    if isinstance(exc, ArchiveOpenError):
        return ExitCodes.ARCHIVE_OPEN_FAILED
    if isinstance(exc, InvalidPathError):
        return ExitCodes.INVALID_PATH
    if isinstance(exc, ExtractionError):
        return ExitCodes.EXTRACTION_FAILED
    return None
