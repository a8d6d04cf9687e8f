"""Exception hierarchy for URL parsing and normalisation."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories callers can branch on."""

    INVALID_URL = "invalid_url"
    INVALID_PATTERN = "invalid_pattern"
    UNKNOWN_PRESET = "unknown_preset"


class UrlNormalizerError(Exception):
    """Base class for every error raised by this package.

    Args:
        kind:    Failure category.
        message: Human-readable description.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ParseError(UrlNormalizerError):
    """Raised when a raw string cannot be decomposed into URL components."""

    def __init__(self, raw_url: object, reason: str) -> None:
        super().__init__(ErrorKind.INVALID_URL, f"Invalid URL {raw_url!r}: {reason}")
        self.raw_url = raw_url
        self.reason = reason


class NormalizeError(UrlNormalizerError):
    """Raised when normalisation cannot proceed with the supplied options."""

    def __init__(self, kind: ErrorKind, message: str, pattern: str | None = None) -> None:
        super().__init__(kind, message)
        self.pattern = pattern

    @classmethod
    def invalid_pattern(cls, pattern: str, error: str) -> "NormalizeError":
        """Build the error for an exclusion pattern that failed to compile."""
        return cls(
            ErrorKind.INVALID_PATTERN,
            f"Invalid exclusion pattern {pattern!r}: {error}",
            pattern=pattern,
        )

    @classmethod
    def unknown_preset(cls, name: str) -> "NormalizeError":
        """Build the error for a preset name that is not defined."""
        return cls(ErrorKind.UNKNOWN_PRESET, f"Unknown exclusion preset {name!r}")
