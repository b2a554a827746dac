"""Archive reader adapter over :mod:`zipfile`.

The extractor only talks to this small surface: open a container and get a
status code back, enumerate entries by index, and hand over a list of names
for bulk extraction. Decompression and CRC checks stay inside ``zipfile``;
failures are reported as libzip-style status codes (see
:class:`~safe_unzip.constants.ZipStatus`).
"""

from __future__ import annotations

import os
import shutil
import zipfile
import zlib
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .constants import ZipStatus
from .logging_config import get_logger
from .validation import normalize_entry_name

logger = get_logger(__name__)


@dataclass(frozen=True)
class EntryStat:
    """Metadata for one archive entry."""

    index: int
    name: str
    size: int
    crc: int


def _open_status(exc: BaseException) -> int:
    if isinstance(exc, FileNotFoundError):
        return ZipStatus.NOENT
    if isinstance(exc, zipfile.BadZipFile):
        if "multiple disks" in str(exc):
            return ZipStatus.MULTIDISK
        return ZipStatus.NOZIP
    if isinstance(exc, EOFError):
        return ZipStatus.EOF
    return ZipStatus.OPEN


def _extract_status(exc: BaseException) -> int:
    if isinstance(exc, KeyError):
        return ZipStatus.NOENT
    if isinstance(exc, zipfile.BadZipFile):
        if "CRC" in str(exc):
            return ZipStatus.CRC
        return ZipStatus.INCONS
    if isinstance(exc, NotImplementedError):
        return ZipStatus.COMPNOTSUPP
    if isinstance(exc, RuntimeError) and "encrypted" in str(exc):
        return ZipStatus.ENCRNOTSUPP
    if isinstance(exc, zlib.error):
        return ZipStatus.ZLIB
    if isinstance(exc, EOFError):
        return ZipStatus.EOF
    if isinstance(exc, MemoryError):
        return ZipStatus.MEMORY
    return ZipStatus.WRITE


class ZipArchiveReader:
    """One open ZIP container.

    Use :meth:`open` rather than the constructor; it reports failures as a
    status code instead of raising.
    """

    def __init__(self, archive: zipfile.ZipFile, path: str):
        self._zip: Optional[zipfile.ZipFile] = archive
        self.path = path
        self.status = ZipStatus.OK
        self.error: Optional[str] = None

    @classmethod
    def open(cls, path) -> Tuple[Optional["ZipArchiveReader"], int]:
        """Open `path`, returning ``(reader, ZipStatus.OK)`` or ``(None, status)``."""
        path = os.fspath(path)
        try:
            archive = zipfile.ZipFile(path, 'r')
        except (OSError, zipfile.BadZipFile, EOFError) as exc:
            status = _open_status(exc)
            logger.debug("Opening %s failed with status %d: %s", path, status, exc)
            return None, status
        return cls(archive, path), ZipStatus.OK

    def _archive(self) -> zipfile.ZipFile:
        if self._zip is None:
            self.status = ZipStatus.ZIPCLOSED
            raise ValueError(f"Archive already closed: {self.path}")
        return self._zip

    def entry_count(self) -> int:
        return len(self._archive().infolist())

    def stat_at(self, index: int) -> EntryStat:
        """Return metadata for the entry at `index` (raises IndexError)."""
        info = self._archive().infolist()[index]
        return EntryStat(index=index, name=info.filename, size=info.file_size, crc=info.CRC)

    def _members_by_name(self) -> Dict[str, zipfile.ZipInfo]:
        return {normalize_entry_name(info.filename): info for info in self._archive().infolist()}

    def extract_to(self, target_directory: str, names: Iterable[str]) -> bool:
        """Write the named entries below `target_directory`.

        `names` are ``/``-normalized entry names that have already been
        validated. Returns False on the first failure with `status` and
        `error` describing it.
        """
        try:
            archive = self._archive()
        except ValueError as exc:
            self.error = str(exc)
            return False

        members = self._members_by_name()
        try:
            os.makedirs(target_directory, exist_ok=True)
            for name in names:
                info = members[name]
                destination = os.path.join(target_directory, *name.split('/'))
                if name.endswith('/') or info.is_dir():
                    os.makedirs(destination, exist_ok=True)
                    continue
                parent = os.path.dirname(destination)
                if parent:
                    os.makedirs(parent, exist_ok=True)
                with archive.open(info) as source, open(destination, 'wb') as sink:
                    shutil.copyfileobj(source, sink)
        except (KeyError, OSError, zipfile.BadZipFile, NotImplementedError,
                RuntimeError, zlib.error, EOFError, MemoryError) as exc:
            self.status = _extract_status(exc)
            self.error = f"{type(exc).__name__}: {exc}"
            return False

        self.status = ZipStatus.OK
        self.error = None
        return True

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None


__all__ = ["EntryStat", "ZipArchiveReader"]
