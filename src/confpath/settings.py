"""Validated resolver settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from confpath.config import Config
from confpath.errors import ConfigError
from confpath.loader import DEFAULT_EXTENSIONS

__all__ = ["ResolverSettings", "SETTINGS_SECTION"]

SETTINGS_SECTION = "resolver"


class ResolverSettings(BaseModel):
    """Settings for a ConfigResolver.

    Attributes:
        index_name: Resource name of the config index.
        index_dir: Sub-location of the config index below the root.
        extensions: File extensions tried in order when locating a resource.
        cache: Keep parsed resources in memory between calls.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    index_name: str = "config"
    index_dir: str = "config"
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    cache: bool = False

    @field_validator("index_name")
    @classmethod
    def check_index_name(cls, v: str) -> str:
        if not v or "." in v or "/" in v:
            raise ValueError("index_name must be a single path segment")
        return v

    @field_validator("extensions")
    @classmethod
    def check_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("at least one extension is required")
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"extension '{ext}' must start with '.'")
        return v

    @classmethod
    def from_config(cls, config: Config | None) -> ResolverSettings:
        """Build settings from the ``resolver`` section of a Config."""
        if config is None:
            return cls()
        section: Any = config.get(SETTINGS_SECTION, {})
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ConfigError(message=f"'{SETTINGS_SECTION}' must be a mapping, got {type(section).__name__}")
        try:
            return cls(**section)
        except ValidationError as e:
            raise ConfigError(message=f"Invalid resolver settings: {e}", cause=e) from e
