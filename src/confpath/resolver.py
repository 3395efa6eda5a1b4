"""ConfigResolver: resolve dotted paths across configuration resources.

The first segment of a path names a resource file, the rest is a key
inside it::

    resolver = ConfigResolver("/srv/app")
    resolver.get("database.connections.mysql.host")

Where resources live is itself configured. The config index resource
(``<root>/config/config.yaml`` by default) maps every base to its
sub-location::

    config:
      path: config
    lang:
      path: resources/lang

so ``resolver.get("messages.welcome", base="lang")`` reads
``<root>/resources/lang/messages.yaml``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from confpath.config import Config
from confpath.errors import InvalidPathError, TypeMismatchError
from confpath.keys import key_exists, resolve_key
from confpath.loader import ResourceLoader
from confpath.paths import join_path, split_path, validate_path
from confpath.settings import ResolverSettings

__all__ = ["ConfigResolver", "DEFAULT_BASE"]

logger = logging.getLogger(__name__)

DEFAULT_BASE = "config"

_PATH_KEY = "path"


class ConfigResolver:
    """Resolves dotted configuration paths against files below an application root."""

    def __init__(
        self,
        root: str | Path,
        config: Config | None = None,
        loader: ResourceLoader | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            root: Application root directory.
            config: Optional Config whose ``resolver`` section holds ResolverSettings.
            loader: Optional pre-built ResourceLoader. Overrides root and the
                extension/cache settings.
        """
        self._settings = ResolverSettings.from_config(config)
        self._loader = loader or ResourceLoader(
            root,
            extensions=self._settings.extensions,
            cache=self._settings.cache,
        )

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    @property
    def loader(self) -> ResourceLoader:
        return self._loader

    def get(self, path: str, base: str = DEFAULT_BASE) -> Any:
        """Return the value stored at a dotted path.

        Args:
            path: ``<resource>[.<key>...]``. A bare resource name returns the
                whole resource.
            base: Base whose ``path`` entry in the config index locates the resource.

        Raises:
            InvalidPathError: If path is malformed.
            ResourceNotFoundError: If the resource file is missing.
            KeyNotFoundError: If the key does not resolve.
        """
        resource, key = split_path(validate_path(path))
        data = self._loader.load(resource, self.resolve_base_path(base))
        value = resolve_key(data, key)
        logger.debug("Resolved '%s' (base '%s')", path, base)
        return value

    def has(self, path: str, key: str, base: str = DEFAULT_BASE) -> bool:
        """Check whether key exists within the scope addressed by path.

        path locates the resource and an optional scope inside it; key is
        appended to that scope. ``has("database.connections", "mysql")``
        probes ``connections.mysql`` in the ``database`` resource.

        Missing keys return False. A missing resource raises
        ResourceNotFoundError, and a malformed path or key (empty, leading or
        trailing dot, empty segment) raises InvalidPathError.
        """
        resource, scope = split_path(validate_path(path))
        validate_path(key)
        data = self._loader.load(resource, self.resolve_base_path(base))
        return key_exists(data, join_path(scope, key))

    def exists(self, path: str, base: str = DEFAULT_BASE) -> bool:
        """Check whether a full dotted path resolves. A missing resource raises."""
        resource, key = split_path(validate_path(path))
        data = self._loader.load(resource, self.resolve_base_path(base))
        if key is None:
            return True
        return key_exists(data, key)

    def load(self, resource: str, base: str = DEFAULT_BASE) -> dict[str, Any]:
        """Return a whole resource by name."""
        name, key = split_path(validate_path(resource))
        if key is not None:
            raise InvalidPathError(path=resource, reason="resource name must be a single segment")
        return self._loader.load(name, self.resolve_base_path(base))

    def resolve_base_path(self, base: str) -> str:
        """Return the sub-location configured for base in the config index.

        The index is read from its fixed location first, then
        ``<base>.path`` is resolved inside it like any other key.

        Raises:
            ResourceNotFoundError: If the config index is missing.
            KeyNotFoundError: If the index has no ``<base>.path`` entry.
            TypeMismatchError: If the entry is not a string.
        """
        validate_path(base)
        index = self._load_index()
        index_key = join_path(base, _PATH_KEY)
        location = resolve_key(index, index_key)
        if location is None:
            return ""
        if not isinstance(location, str):
            raise TypeMismatchError(key=index_key, segment=_PATH_KEY, found=type(location).__name__)
        return location

    def _load_index(self) -> dict[str, Any]:
        return self._loader.load(self._settings.index_name, self._settings.index_dir)
