"""Shared fixtures: ZIP archives built on the fly."""

from __future__ import annotations

import os
import sys
import zipfile
from pathlib import Path
from typing import Iterable, Tuple, Union

import pytest

# Ensure project root is on sys.path when running without installing
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

Entry = Tuple[str, Union[str, bytes]]


def write_zip(path: Path, entries: Iterable[Entry], compression: int = zipfile.ZIP_DEFLATED) -> Path:
    """Write `entries` (name, data) into a new archive at `path`."""
    with zipfile.ZipFile(path, 'w', compression=compression) as archive:
        for name, data in entries:
            archive.writestr(name, data)
    return path


@pytest.fixture
def make_zip(tmp_path):
    def _make(entries: Iterable[Entry], name: str = "archive.zip", **kwargs) -> Path:
        return write_zip(tmp_path / name, entries, **kwargs)
    return _make
