"""Error value returned in place of a result."""

from __future__ import annotations

from .common import MALModel


class ErrorResponse(MALModel):
    """Failed call.

    ``status`` is the HTTP status, or 500 when the request produced no
    response at all. ``error`` is the API's error code (``not_found``,
    ``invalid_token``...).
    """

    status: int
    error: str
    message: str | None = None
