"""ResourceLoader: locate and parse configuration resource files."""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from confpath.errors import InvalidPathError, ResourceNotFoundError, ResourceParseError

__all__ = ["ResourceLoader", "DEFAULT_EXTENSIONS"]

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml", ".json")


class ResourceLoader:
    """Reads resource files below an application root into nested dicts.

    A resource named ``db`` under base location ``settings`` is read from
    ``<root>/settings/db.yaml`` (or the first existing file among the
    configured extensions). An empty base location means the root itself.

    Thread safety:
        With ``cache=True`` the cache is guarded by a lock and every file
        is parsed at most once until ``clear_cache()`` is called.
    """

    def __init__(
        self,
        root: str | Path,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        cache: bool = False,
    ) -> None:
        self._root: Path = Path(root).resolve()
        self._extensions: tuple[str, ...] = tuple(extensions)
        self._cache_enabled: bool = cache
        self._cache: dict[Path, dict[str, Any]] = {}
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        """The application root all locations are relative to."""
        return self._root

    def locate(self, resource: str, base: str = "") -> Path:
        """Return the file for a resource without reading it.

        Raises:
            InvalidPathError: If the resource name is empty or contains a path separator.
            ResourceNotFoundError: If no candidate file exists.
        """
        if not resource or "/" in resource or os.sep in resource or resource in (".", ".."):
            raise InvalidPathError(path=resource, reason="not a valid resource name")

        directory = self._root / base if base else self._root
        candidates = [directory / f"{resource}{ext}" for ext in self._extensions]
        for candidate in candidates:
            if candidate.is_file():
                return candidate

        location = str(candidates[0]) if candidates else str(directory / resource)
        raise ResourceNotFoundError(resource=resource, location=location)

    def load(self, resource: str, base: str = "") -> dict[str, Any]:
        """Load a resource and return its root mapping.

        Args:
            resource: Resource name, the file name without extension.
            base: Sub-location below the root. Empty means the root.

        Raises:
            ResourceNotFoundError: If the file is missing or unreadable.
            ResourceParseError: If the content is invalid or not a mapping.
        """
        file_path = self.locate(resource, base)

        if not self._cache_enabled:
            return self._read(resource, file_path)

        with self._lock:
            if file_path in self._cache:
                logger.debug("Cache hit for resource '%s' (%s)", resource, file_path)
            else:
                self._cache[file_path] = self._read(resource, file_path)
            return copy.deepcopy(self._cache[file_path])

    def clear_cache(self) -> None:
        """Drop all cached resources."""
        with self._lock:
            self._cache.clear()

    def _read(self, resource: str, file_path: Path) -> dict[str, Any]:
        logger.debug("Loading resource '%s' from %s", resource, file_path)
        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ResourceParseError(location=str(file_path), reason=f"invalid UTF-8: {e}", cause=e) from e
        except OSError as e:
            raise ResourceNotFoundError(resource=resource, location=str(file_path), cause=e) from e

        if not content.strip():
            return {}

        if file_path.suffix == ".json":
            try:
                parsed = json.loads(content)
            except json.JSONDecodeError as e:
                raise ResourceParseError(location=str(file_path), reason=f"invalid JSON: {e}", cause=e) from e
        else:
            try:
                parsed = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ResourceParseError(location=str(file_path), reason=f"invalid YAML: {e}", cause=e) from e

        if parsed is None:
            return {}

        if not isinstance(parsed, dict):
            raise ResourceParseError(
                location=str(file_path),
                reason=f"must be a mapping, got {type(parsed).__name__}",
            )
        return parsed
