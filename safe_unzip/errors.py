"""
Custom exception classes for safe-unzip.
"""

from typing import Optional

from .status import status_to_text


class SafeUnzipError(Exception):
    """Base exception class for safe-unzip errors."""
    pass


class ArchiveOpenError(SafeUnzipError):
    """Raised when the archive container cannot be opened."""

    def __init__(self, status: int, archive_path: str):
        self.status = status
        self.archive_path = archive_path
        super().__init__(f"{status_to_text(status)}: {archive_path}")


class InvalidPathError(SafeUnzipError):
    """Raised when an entry name fails path validation."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid filename path in zip archive: {name}")


class ExtractionError(SafeUnzipError):
    """Raised when writing the accepted entries to disk fails."""

    def __init__(self, status: int, detail: Optional[str] = None):
        self.status = status
        self.detail = detail
        super().__init__(status_to_text(status))
