"""Error taxonomy for the IGDB Python client."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any


@dataclass(slots=True)
class RequestDetails:
    operation: str
    url: str
    context: str | None = None
    status_code: int | None = None
    response_body: Any | None = None


@dataclass(frozen=True, slots=True)
class ServerError:
    """Status reported by the IGDB service for a failed request."""

    status: int
    message: str
    temporary: bool = False

    def __str__(self) -> str:
        return f"Status {self.status} - {self.message}"


ERR_BAD_REQUEST = ServerError(400, "bad request: check query parameters")
ERR_AUTH_FAILED = ServerError(401, "authentication failed: check for valid API key in user-key header")
ERR_MANY_REQUESTS = ServerError(429, "too many requests since last request reset", temporary=True)
ERR_INTERNAL_ERROR = ServerError(500, "internal error: report bug")


class IGDBError(Exception):
    """Base class for all client errors."""


class InvalidArgumentError(IGDBError, ValueError):
    """Raised before any network call when the caller passes unusable arguments."""


class NegativeIDError(InvalidArgumentError):
    """Raised when a negative ID is used as an argument."""


class EmptyIDsError(InvalidArgumentError):
    """Raised when a multi-get receives an empty ID list."""


class EmptyQueryError(InvalidArgumentError):
    """Raised when a search receives blank text."""


class EmptyFieldError(InvalidArgumentError):
    """Raised when a field name is blank."""


class EmptyFilterValueError(InvalidArgumentError):
    """Raised when a filter needing a value receives none."""


class TooManyArgsError(InvalidArgumentError):
    """Raised when an option receives more values than it accepts."""


class OutOfRangeError(InvalidArgumentError):
    """Raised when a numeric option is outside its valid range."""


class UnsupportedOperatorError(InvalidArgumentError):
    """Raised when a filter operator is not one IGDB understands."""


class ApiError(IGDBError):
    """Raised when a request reached the service but could not be satisfied."""

    def __init__(self, message: str, *, details: RequestDetails) -> None:
        super().__init__(message)
        self.details = details


class ServiceError(ApiError):
    """Raised for non-success HTTP statuses."""

    def __init__(self, message: str, *, error: ServerError, details: RequestDetails) -> None:
        super().__init__(message, details=details)
        self.error = error

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def temporary(self) -> bool:
        return self.error.temporary


class BadRequestError(ServiceError):
    """Raised for HTTP 400."""


class AuthError(ServiceError):
    """Raised for authentication/authorization failures."""


class RateLimitError(ServiceError):
    """Raised for HTTP 429. The request may succeed later."""


class InternalServerError(ServiceError):
    """Raised for HTTP 500."""


class NoResultsError(ApiError):
    """Raised when a valid request matched nothing."""


class DecodeError(ApiError):
    """Raised when a response body cannot be decoded into the requested shape."""

    def __init__(
        self,
        message: str,
        *,
        details: RequestDetails,
        model_name: str | None = None,
        errors: Any | None = None,
        raw_sample: Any | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.model_name = model_name
        self.errors = errors
        self.raw_sample = raw_sample


class InvalidJSONError(DecodeError):
    """Raised when the service returned an empty or whitespace-only body."""


_WELL_KNOWN: dict[int, tuple[ServerError, type[ServiceError]]] = {
    400: (ERR_BAD_REQUEST, BadRequestError),
    401: (ERR_AUTH_FAILED, AuthError),
    403: (replace(ERR_AUTH_FAILED, status=403), AuthError),
    429: (ERR_MANY_REQUESTS, RateLimitError),
    500: (ERR_INTERNAL_ERROR, InternalServerError),
}


def describe(details: RequestDetails) -> str:
    if details.context:
        return f"{details.operation} ({details.context})"
    return details.operation


def server_error_from_body(status_code: int, body: bytes) -> ServerError:
    """Read the service's own ``{status, message}`` payload, or fall back to the raw status."""
    try:
        payload = json.loads(body) if body.strip() else None
    except (UnicodeDecodeError, json.JSONDecodeError):
        payload = None

    if isinstance(payload, list) and payload and isinstance(payload[0], dict):
        payload = payload[0]

    if isinstance(payload, dict):
        message = payload.get("message")
        if not isinstance(message, str) or not message:
            message = payload.get("title") if isinstance(payload.get("title"), str) else None
        status = payload.get("status")
        if message:
            return ServerError(
                status=status if isinstance(status, int) and not isinstance(status, bool) else status_code,
                message=message,
                temporary=payload.get("temporary") is True,
            )

    return ServerError(status=status_code, message=f"unexpected HTTP status {status_code}")


def classify_api_error(details: RequestDetails, body: bytes = b"") -> ServiceError:
    status = details.status_code or 0

    known = _WELL_KNOWN.get(status)
    if known is not None:
        error, error_type = known
        return error_type(f"{describe(details)} failed: {error}", error=error, details=details)

    error = server_error_from_body(status, body)
    return ServiceError(f"{describe(details)} failed: {error}", error=error, details=details)
