"""In-memory configuration accessor with dot-path key support."""

from __future__ import annotations

from typing import Any

from confpath.errors import KeyNotFoundError
from confpath.keys import key_exists, resolve_key

__all__ = ["Config"]


class Config:
    """Dot-path accessor over a plain mapping.

    Keys resolve the same way resources do: a literal key containing dots
    wins over nested traversal.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        try:
            return resolve_key(self._data, key)
        except KeyNotFoundError:
            return default

    def has(self, key: str) -> bool:
        return key_exists(self._data, key)
