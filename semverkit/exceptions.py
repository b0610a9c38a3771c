"""
Custom exception hierarchy for semverkit.

This module defines structured exception types used across semverkit.
All exceptions inherit from :class:`SemverError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Union

from semverkit.constants import ERROR_TEXT_MAX_LENGTH


class SemverError(Exception):
    """Base exception for all semverkit errors.

    All semverkit-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _truncate(text: str, max_length: int = ERROR_TEXT_MAX_LENGTH) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def _printable(text: Union[str, bytes, bytearray]) -> str:
    """Render version input as text, escaping any non-ASCII bytes."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("ascii", errors="backslashreplace")
    return text


class InvalidVersionError(SemverError, ValueError):
    """Raised when a string is not a valid semantic version.

    The error does not say which grammar rule failed. The offending input
    is kept as given on ``text`` (``str`` or ``bytes``); the message shows
    a truncated copy, with non-ASCII bytes escaped.

    Args:
        text: The input that failed to parse.
    """

    __slots__ = ("text",)

    def __init__(self, text: Union[str, bytes, bytearray]) -> None:
        super().__init__(
            f"{_truncate(_printable(text))!r} is not a valid semantic version"
        )
        self.text = text


class InvalidVersionFieldError(SemverError, ValueError):
    """Raised when a version is constructed from an unusable field value.

    Args:
        message: Error description.
        field: Name of the offending field.
        value: The rejected value.
    """

    __slots__ = ("field", "value")

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: Any,
    ) -> None:
        details: MutableMapping[str, Any] = {
            "field": field,
            "value": _truncate(repr(value)),
        }
        super().__init__(message, details)

        self.field = field
        self.value = value


class VersionOverflowError(SemverError, OverflowError):
    """Raised when a bump would push a field past the numeric limit.

    Args:
        message: Error description.
        field: Name of the field being incremented.
        version: Rendered version that could not be bumped.
    """

    __slots__ = ("field", "version")

    def __init__(
        self,
        message: str,
        *,
        field: str,
        version: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {"field": field}
        if version is not None:
            details["version"] = version

        super().__init__(message, details)

        self.field = field
        self.version = version
