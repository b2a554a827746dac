"""Entry name validation.

Archive entry names are untrusted input. A validator is any callable taking
the ``/``-normalized entry name and returning ``True`` when the entry may be
extracted; :func:`is_valid_path` is the default policy and can be replaced
per :class:`~safe_unzip.extractor.Extractor`.
"""

from __future__ import annotations

from typing import Callable

PathValidator = Callable[[str], bool]


def normalize_entry_name(name: str) -> str:
    """Convert Windows directory separators to ``/``."""
    return name.replace('\\', '/')


def is_valid_path(name: str) -> bool:
    """Default validation policy.

    Rejects absolute paths (leading ``/``), any segment that is exactly
    ``..``, and any ``:`` (scheme or drive-letter prefixes).
    """
    path = normalize_entry_name(name)
    if path.startswith('/'):
        return False
    if '..' in path.split('/'):
        return False
    if ':' in path:
        return False
    return True


__all__ = ["PathValidator", "normalize_entry_name", "is_valid_path"]
