"""Result values returned at the public boundary.

Every call that talks to the API returns either its result or an
``ErrorResponse``; nothing from the transport or the API is raised to the
caller. ``is_error`` is the discriminator.
"""

from __future__ import annotations

from typing import Any, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.errors import ErrorResponse
from .exceptions import APIError, TransportError

T = TypeVar("T")

# Returned when a request never produced a response
NO_RESPONSE_STATUS = 500
NO_RESPONSE_ERROR = "unknown"
NO_RESPONSE_MESSAGE = "error with no response"

Result = Union[T, ErrorResponse]


def is_error(result: Any) -> bool:
    """True when ``result`` is an ErrorResponse."""
    return isinstance(result, ErrorResponse)


def no_response_error() -> ErrorResponse:
    """Fallback for a request that never produced a response."""
    return ErrorResponse(
        status=NO_RESPONSE_STATUS,
        error=NO_RESPONSE_ERROR,
        message=NO_RESPONSE_MESSAGE,
    )


def error_from_api_error(exc: APIError) -> ErrorResponse:
    message = None
    if isinstance(exc.body, dict):
        message = exc.body.get("message")
        if message is not None and not isinstance(message, str):
            message = str(message)
    return ErrorResponse(
        status=exc.status_code,
        error=exc.error if isinstance(exc.error, str) else NO_RESPONSE_ERROR,
        message=message,
    )


def error_from_exception(exc: APIError | TransportError) -> ErrorResponse:
    """Turn a runtime exception into the matching error value."""
    if isinstance(exc, APIError):
        return error_from_api_error(exc)
    return no_response_error()


def invalid_response_error(status: int, exc: PydanticValidationError) -> ErrorResponse:
    """A success body that does not match the expected shape."""
    return ErrorResponse(
        status=status,
        error="invalid_response",
        message=f"{exc.error_count()} validation error(s) for {exc.title}",
    )
