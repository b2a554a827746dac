"""Translate archive status codes into diagnostic text."""

from __future__ import annotations

from .constants import STATUS_STRINGS, UNKNOWN_STATUS


def status_to_text(status: int) -> str:
    """Return ``"<phrase>(<code>)"`` for an archive status code."""
    phrase = STATUS_STRINGS.get(status, UNKNOWN_STATUS)
    return f"{phrase}({status})"


__all__ = ["status_to_text"]
