"""Error hierarchy for the configstore package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Sequence

__all__ = [
    "ConfigStoreError",
    "ConfigKeyError",
    "InvalidInputError",
    "ErrorCodes",
]


class ConfigStoreError(Exception):
    """Base error for all configstore errors."""

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


class ConfigKeyError(ConfigStoreError):
    """Raised when a key path does not resolve to a value."""

    def __init__(self, path: Sequence[Any], **kwargs: Any) -> None:
        path = tuple(path)
        super().__init__(
            code="CONFIG_KEY_NOT_FOUND",
            message=f"Config path not found: {' -> '.join(map(repr, path)) or '<root>'}",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> tuple[Any, ...]:
        """The key path that failed to resolve."""
        return self.details["path"]


class InvalidInputError(ConfigStoreError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All configstore error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_KEY_NOT_FOUND:
            use_fallback()
    """

    CONFIG_KEY_NOT_FOUND = "CONFIG_KEY_NOT_FOUND"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
