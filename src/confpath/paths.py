"""Dotted path helpers: split, join, validate."""

from __future__ import annotations

from confpath.errors import InvalidPathError

__all__ = ["SEPARATOR", "split_path", "join_path", "validate_path"]

SEPARATOR = "."


def split_path(path: str) -> tuple[str, str | None]:
    """Peel the first segment off a dotted path.

    Only the first separator is consumed; the remainder is returned joined
    and is split again on the next call.

    Example:
        split_path("a.b.c") == ("a", "b.c")
        split_path("a") == ("a", None)
    """
    if SEPARATOR not in path:
        return path, None
    head, rest = path.split(SEPARATOR, 1)
    return head, rest


def join_path(*segments: str | None) -> str:
    """Join segments with the separator, skipping None and empty ones."""
    return SEPARATOR.join(s for s in segments if s)


def validate_path(path: str) -> str:
    """Return path unchanged, or raise InvalidPathError if it is malformed."""
    if not isinstance(path, str):
        raise InvalidPathError(path=repr(path), reason=f"expected str, got {type(path).__name__}")
    if not path:
        raise InvalidPathError(path=path, reason="path is empty")
    if path.startswith(SEPARATOR):
        raise InvalidPathError(path=path, reason="leading separator")
    if path.endswith(SEPARATOR):
        raise InvalidPathError(path=path, reason="trailing separator")
    if SEPARATOR * 2 in path:
        raise InvalidPathError(path=path, reason="empty segment")
    return path
