"""Recursive dotted-key resolution within a loaded resource.

A key is first looked up as a whole literal string, so a mapping may hold
keys that themselves contain dots. Only when that fails is the key split
into its first segment and the remainder, and resolution continues one
level down. At every level the literal match wins over decomposition.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from confpath.errors import KeyNotFoundError, TypeMismatchError
from confpath.paths import split_path

__all__ = ["resolve_key", "key_exists", "is_container"]

_MISSING = object()

_MAX_INDEX_DIGITS = 18


def is_container(value: Any) -> bool:
    """Whether resolution may descend into value."""
    return isinstance(value, (Mapping, list, tuple))


def _is_index(segment: str) -> bool:
    return len(segment) <= _MAX_INDEX_DIGITS and segment.isascii() and segment.isdecimal()


def _lookup(container: Any, segment: str) -> Any:
    """Return the child of container at segment, or _MISSING."""
    if isinstance(container, Mapping):
        if segment in container:
            return container[segment]
        # YAML turns unquoted numeric keys into ints
        if _is_index(segment):
            index = int(segment)
            for k in container:
                if isinstance(k, int) and not isinstance(k, bool) and k == index:
                    return container[k]
        return _MISSING
    if isinstance(container, (list, tuple)) and _is_index(segment):
        index = int(segment)
        if index < len(container):
            return container[index]
    return _MISSING


def resolve_key(data: Any, key: str | None) -> Any:
    """Resolve a dotted key against data.

    Args:
        data: A loaded resource or any nested value inside one.
        key: Dotted key. None returns data itself.

    Returns:
        The stored value, unchanged.

    Raises:
        KeyNotFoundError: If no entry matches the key.
        TypeMismatchError: If a segment resolves to a scalar while segments remain.
    """
    if key is None:
        return data
    return _resolve(data, key, key)


def _resolve(data: Any, key: str, full_key: str) -> Any:
    value = _lookup(data, key)
    if value is not _MISSING:
        return value

    index, remaining = split_path(key)
    if remaining is None:
        raise KeyNotFoundError(key=full_key)

    child = _lookup(data, index)
    if child is _MISSING:
        raise KeyNotFoundError(key=full_key)
    if not is_container(child):
        raise TypeMismatchError(key=full_key, segment=index, found=type(child).__name__)

    return _resolve(child, remaining, full_key)


def key_exists(data: Any, key: str | None) -> bool:
    """Boolean counterpart of resolve_key. Never raises."""
    if key is None or not is_container(data):
        return False

    if _lookup(data, key) is not _MISSING:
        return True

    index, remaining = split_path(key)
    if remaining is None:
        return False

    child = _lookup(data, index)
    if child is _MISSING:
        return False
    return key_exists(child, remaining)
