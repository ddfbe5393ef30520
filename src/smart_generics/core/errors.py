"""Error types for smart_generics."""

from __future__ import annotations


class SmartGenericsError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(SmartGenericsError):
    """Invalid timing configuration."""


class TimerDisposedError(SmartGenericsError):
    """Raised when a debouncer or throttler is used after dispose."""


class ParseError(SmartGenericsError):
    """JSON payload could not be decoded into an object."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.http_status = http_status


class ResultUnwrapError(SmartGenericsError):
    """Raised when unwrapping a failed result."""


__all__ = [
    "SmartGenericsError",
    "ConfigurationError",
    "TimerDisposedError",
    "ParseError",
    "ResultUnwrapError",
]
