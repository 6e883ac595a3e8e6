"""Exception hierarchy for the FogBugz client.

- FogBugzError: base for everything raised by this package
- ParseError: malformed date literal
- BuilderError: required field missing when finalizing a builder
- DecodeError: response JSON does not match the expected record
- UnknownStatusError: status code absent from the status table
- ServiceError: FogBugz answered with a non-success HTTP status
- TransportError: network / URL failure below the HTTP layer
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "BuilderError",
    "DecodeError",
    "FogBugzError",
    "ParseError",
    "ServiceError",
    "TransportError",
    "UnknownStatusError",
]


class FogBugzError(Exception):
    """Base exception for FogBugz client errors."""

    pass


class ParseError(FogBugzError, ValueError):
    """Raised when a date literal cannot be parsed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid date literal {text!r}: {reason}")


class BuilderError(FogBugzError):
    """Raised by ``build()`` when a required field was never supplied."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} is not specified")


class DecodeError(FogBugzError):
    """Raised when a response payload does not match the expected record."""

    def __init__(self, message: str, *, field: str | None = None):
        self.detail = message
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.detail}"
        return self.detail

    def nest(self, prefix: str) -> None:
        """Prepend ``prefix`` to the field path, keeping the exception type."""
        self.field = f"{prefix}.{self.field}" if self.field else prefix


class UnknownStatusError(DecodeError):
    """Raised when a status id has no entry in the status table.

    The offending numeric value is kept on ``code`` so callers can log it or
    extend the table for their installation.
    """

    def __init__(self, code: int, *, field: str | None = "ixStatus"):
        self.code = code
        super().__init__(f"unknown status {code}", field=field)


class ServiceError(FogBugzError):
    """Raised when FogBugz responds with a non-success status.

    The body is carried as-is in ``payload``; it is not interpreted further.
    """

    def __init__(self, payload: Any, status_code: int | None = None):
        self.payload = payload
        self.status_code = status_code
        prefix = f"FogBugz error ({status_code})" if status_code is not None else "FogBugz error"
        super().__init__(f"{prefix}: {payload!r}")


class TransportError(FogBugzError):
    """Raised when the HTTP call itself fails (connection, timeout, bad URL)."""

    pass
