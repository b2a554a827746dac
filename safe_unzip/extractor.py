"""Extraction of untrusted ZIP archives.

Every entry name is validated before anything is written. Only the accepted
names are passed to the archive reader, in one bulk request, and the same
list is returned to the caller as the manifest of what landed on disk.
"""

from __future__ import annotations

import logging
import os
from contextlib import closing
from typing import Callable, List, Optional, Tuple

from .constants import TARGET_SEPARATORS, ZipStatus
from .errors import ArchiveOpenError, ExtractionError, InvalidPathError
from .logging_config import get_logger
from .reader import ZipArchiveReader
from .status import status_to_text
from .validation import PathValidator, is_valid_path, normalize_entry_name

ReaderFactory = Callable[[str], Tuple[Optional[ZipArchiveReader], int]]


def normalize_target_directory(path) -> str:
    """Make sure the target path ends in exactly one separator."""
    path = os.fspath(path)
    if not path:
        return os.curdir + os.sep
    stripped = path.rstrip(''.join(TARGET_SEPARATORS))
    if not stripped:
        # filesystem root
        return path[0]
    return stripped + os.sep


class Extractor:
    """Extract ZIP archives with a pluggable entry name policy.

    Instances hold no per-call state and may be shared between threads.

    Args:
        validator: Callable deciding whether a ``/``-normalized entry name
            may be extracted. Defaults to :func:`is_valid_path`.
        reader_factory: Callable opening an archive path and returning
            ``(reader, status)``. Defaults to :meth:`ZipArchiveReader.open`.
        logger: Logger for diagnostics.
    """

    def __init__(
        self,
        validator: PathValidator = is_valid_path,
        reader_factory: Optional[ReaderFactory] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.validator = validator
        self.reader_factory = reader_factory or ZipArchiveReader.open
        self.logger = logger or get_logger(__name__)

    def extract(self, archive_path, target_directory, continue_on_error: bool = False) -> List[str]:
        """
        Extract an archive into a target directory.

        Args:
            archive_path: Path of the .zip file
            target_directory: Destination directory (created when missing)
            continue_on_error: Skip invalid entry names with a warning
                instead of aborting

        Returns:
            Names of the extracted entries, in archive order

        Raises:
            ArchiveOpenError: The archive could not be opened
            InvalidPathError: An entry name was rejected and
                `continue_on_error` is False
            ExtractionError: Writing the entries to disk failed
        """
        archive_path = os.fspath(archive_path)
        reader, status = self.reader_factory(archive_path)
        if reader is None or status != ZipStatus.OK:
            raise ArchiveOpenError(status, archive_path)

        with closing(reader):
            target = normalize_target_directory(target_directory)
            filenames = self._extract_filenames(reader, continue_on_error)

            if not reader.extract_to(target, filenames):
                self.logger.error(
                    "Extracting %s to %s failed: %s (%s)",
                    archive_path, target, status_to_text(reader.status), reader.error,
                )
                raise ExtractionError(reader.status, reader.error)

        self.logger.info("Extracted %d entries from %s to %s", len(filenames), archive_path, target)
        return filenames

    def _extract_filenames(self, reader: ZipArchiveReader, continue_on_error: bool) -> List[str]:
        filenames: List[str] = []
        for index in range(reader.entry_count()):
            filename = self._extract_filename(reader, index, continue_on_error)
            if filename is not None:
                filenames.append(filename)
        return filenames

    def _extract_filename(self, reader: ZipArchiveReader, index: int, continue_on_error: bool) -> Optional[str]:
        entry = reader.stat_at(index)
        filename = normalize_entry_name(entry.name)

        if self.validator(filename):
            self.logger.debug("Accepted entry %d: %s (%d bytes, crc %08x)", index, filename, entry.size, entry.crc)
            return filename

        error = InvalidPathError(filename)
        if continue_on_error:
            self.logger.warning("%s (skipped)", error)
            return None
        raise error


def extract(archive_path, target_directory, continue_on_error: bool = False) -> List[str]:
    """Extract `archive_path` into `target_directory` with the default policy."""
    return Extractor().extract(archive_path, target_directory, continue_on_error)


__all__ = ["Extractor", "extract", "normalize_target_directory"]
