"""
Exceptions - Centralized exception hierarchy for jiractl.

Terminating errors are raised. Non-terminating problems (response shape
anomalies) are not exceptions; they are written as ErrorRecords through the
operation context and processing continues.
"""

from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "JiractlError",
    "ConfigurationError",
    "InputValidationError",
    "ResolutionError",
    "EmptyResultError",
    "TransportError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "ErrorRecord",
    "flatten_error_payload",
]


def flatten_error_payload(payload: Any) -> list[str]:
    """JIRA's `errorMessages` plus the `field: text` entries of its `errors` map."""
    if not isinstance(payload, dict):
        return []
    messages = [str(m) for m in payload.get("errorMessages") or []]
    errors = payload.get("errors") or {}
    if isinstance(errors, dict):
        messages.extend(f"{field}: {text}" for field, text in errors.items())
    return messages


class JiractlError(Exception):
    """Base exception for all jiractl errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(JiractlError):
    """No usable server configuration."""


class InputValidationError(JiractlError):
    """A primary parameter has the wrong type or shape."""

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.expected = expected
        self.actual = actual


class ResolutionError(JiractlError):
    """A referenced entity (project, issue, ...) could not be resolved."""

    def __init__(self, message: str, target: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message, cause=cause)
        self.target = target


class EmptyResultError(JiractlError):
    """The server returned nothing for an operation that requires a result."""


class TransportError(JiractlError):
    """
    The HTTP call failed.

    Carries the HTTP status (None for network failures) and the server's
    error payload exactly as decoded.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        payload: Any = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.status = status
        self.payload = payload

    @property
    def error_messages(self) -> list[str]:
        return flatten_error_payload(self.payload)


class AuthenticationError(TransportError):
    """401 from the server."""


class AccessDeniedError(TransportError):
    """403 from the server."""


class NotFoundError(TransportError):
    """404 from the server."""


@dataclass(frozen=True)
class ErrorRecord:
    """A non-terminating error report."""

    category: str
    message: str
    target: Optional[str] = None
    error_id: Optional[str] = None
    exception: Optional[Exception] = None

    def __str__(self) -> str:
        if self.target:
            return f"{self.message} [{self.target}]"
        return self.message
