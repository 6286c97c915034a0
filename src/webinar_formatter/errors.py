"""Error classes and helpers for the webinar formatter service.

Defines the structured exceptions raised by the formatter, the request
handler and the CRM client, plus a function that converts any exception
into a serializable error payload for HTTP responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass(eq=False)
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    status_code: ClassVar[int] = 500

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class BadRequestError(AppError):
    """Raised when a request is invalid."""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_REQUEST", message, details)


class MissingInputError(AppError):
    """Raised when one or more required request fields are absent or blank."""

    status_code = 400

    def __init__(self, fields: Iterable[str]) -> None:
        missing = list(fields)
        super().__init__(
            "MISSING_INPUT",
            "Missing " + " or ".join(missing),
            {"missing": missing},
        )


class InvalidTimestampError(AppError):
    """Raised when a date/time pair cannot be read as a civil timestamp.

    The details carry the raw combined string and the resolved zone so
    the caller can see exactly what was rejected.
    """

    status_code = 400

    def __init__(self, raw: str, zone: str) -> None:
        super().__init__(
            "INVALID_TIMESTAMP",
            "Invalid date/time",
            {"raw": raw, "zone": zone},
        )


class UpstreamError(AppError):
    """Raised when the CRM answers a custom-value update with a non-2xx status."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("UPSTREAM_ERROR", message, details)


class TimeoutErrorApp(AppError):
    """Raised when an operation exceeds its allowed time budget."""

    status_code = 504

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("TIMEOUT", message, details)


class UnexpectedError(AppError):
    """Wraps any fault that is not part of the taxonomy above."""

    status_code = 500

    def __init__(self, message: str = "Server error", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("SERVER_ERROR", message, details)


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> payload = to_error_payload(MissingInputError(["webinar_date"]))
        >>> payload["code"]
        'MISSING_INPUT'
        >>> to_error_payload(RuntimeError("boom"))["details"]
        {'error': 'boom'}
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    return UnexpectedError(details={"error": str(error)}).to_payload()
