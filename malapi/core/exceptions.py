"""Custom exception hierarchy.

Only programming and configuration mistakes are raised to callers. Failures
coming back from the API travel as ``ErrorResponse`` values instead; the
``TransportError``/``APIError`` pair is used inside the runtime layer and is
converted before it reaches a public method.
"""

from __future__ import annotations

from typing import Any


class MALError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(MALError):
    """Credentials or settings are missing or inconsistent."""

    pass


class ValidationError(MALError):
    """Invalid argument passed to an endpoint method."""

    pass


class FieldSpecError(MALError, ValueError):
    """Field selection tree cannot be serialized (e.g. it contains itself)."""

    pass


class TransportError(MALError):
    """The HTTP request could not be completed; no response is available."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class APIError(MALError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.body = body
