"""Error types raised across the audit pipeline."""

from __future__ import annotations


class AuditError(RuntimeError):
    """Base error for every failure raised by nuget-audit."""


class ConfigError(AuditError):
    """Raised when the configuration cannot be loaded or is invalid."""


class FetchError(AuditError):
    """Raised when an HTTP resource cannot be fetched."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """Raised on connection, DNS or timeout failures."""


class HttpStatusError(FetchError):
    """Raised when the server answers with a non-2xx status code."""

    def __init__(self, message: str, *, url: str = "", status_code: int = 0) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(AuditError):
    """Raised when a payload cannot be decoded as JSON or XML."""


class DecompressionError(DecodeError, FetchError):
    """Raised when a gzip or deflate body cannot be decompressed."""


class MissingFieldError(DecodeError):
    """Raised when an expected JSON field is absent."""


class VersionParseError(AuditError, ValueError):
    """Raised when a version string is not a parseable semantic version."""
