"""Error hierarchy for confpath."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfPathError",
    "ConfigError",
    "ResourceNotFoundError",
    "ResourceParseError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "InvalidPathError",
    "ErrorCodes",
]


class ConfPathError(Exception):
    """Base error for all confpath errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(ConfPathError):
    """Raised when resolver settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ResourceNotFoundError(ConfPathError):
    """Raised when no readable file exists for a resource."""

    def __init__(self, resource: str, location: str, **kwargs: Any) -> None:
        super().__init__(
            code="RESOURCE_NOT_FOUND",
            message=f"Resource file doesn't exist: {location}",
            details={"resource": resource, "location": location},
            **kwargs,
        )

    @property
    def resource(self) -> str:
        """The resource name that was requested."""
        return self.details["resource"]

    @property
    def location(self) -> str:
        """The file location that was looked up."""
        return self.details["location"]


class ResourceParseError(ConfPathError):
    """Raised when a resource file is not valid structured data or not a mapping."""

    def __init__(self, location: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="RESOURCE_PARSE_ERROR",
            message=f"Invalid resource file '{location}': {reason}",
            details={"location": location, "reason": reason},
            **kwargs,
        )

    @property
    def location(self) -> str:
        """The file that failed to parse."""
        return self.details["location"]


class KeyNotFoundError(ConfPathError):
    """Raised when a dotted key does not resolve within a resource."""

    def __init__(self, key: str, code: str = "KEY_NOT_FOUND", message: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", None) or {}
        details["key"] = key
        super().__init__(
            code=code,
            message=message or f"Key not found in config resource: {key}",
            details=details,
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The dotted key that failed to resolve."""
        return self.details["key"]


class TypeMismatchError(KeyNotFoundError):
    """Raised when resolution must descend into a value that is not a container."""

    def __init__(self, key: str, segment: str, found: str, **kwargs: Any) -> None:
        super().__init__(
            key=key,
            code="KEY_TYPE_MISMATCH",
            message=f"Cannot resolve '{key}': segment '{segment}' descends into a {found} value",
            details={"segment": segment, "found": found},
            **kwargs,
        )

    @property
    def segment(self) -> str:
        """The path segment that could not be descended into."""
        return self.details["segment"]


class InvalidPathError(ConfPathError):
    """Raised for malformed dotted paths or resource names."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH",
            message=f"Invalid path '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The rejected path."""
        return self.details["path"]


class ErrorCodes:
    """All confpath error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_default()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_PARSE_ERROR = "RESOURCE_PARSE_ERROR"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    KEY_TYPE_MISMATCH = "KEY_TYPE_MISMATCH"
    INVALID_PATH = "INVALID_PATH"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
