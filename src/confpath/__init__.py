"""confpath - dotted-path access to hierarchical configuration files."""

from __future__ import annotations

# Core
from confpath.resolver import DEFAULT_BASE, ConfigResolver
from confpath.loader import DEFAULT_EXTENSIONS, ResourceLoader
from confpath.keys import key_exists, resolve_key
from confpath.paths import join_path, split_path, validate_path

# Config
from confpath.config import Config
from confpath.settings import ResolverSettings

# Errors
from confpath.errors import (
    ConfigError,
    ConfPathError,
    ErrorCodes,
    InvalidPathError,
    KeyNotFoundError,
    ResourceNotFoundError,
    ResourceParseError,
    TypeMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigResolver",
    "ResourceLoader",
    "DEFAULT_BASE",
    "DEFAULT_EXTENSIONS",
    # Key resolution
    "resolve_key",
    "key_exists",
    # Path utilities
    "split_path",
    "join_path",
    "validate_path",
    # Config
    "Config",
    "ResolverSettings",
    # Errors
    "ErrorCodes",
    "ConfPathError",
    "ConfigError",
    "ResourceNotFoundError",
    "ResourceParseError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "InvalidPathError",
]
