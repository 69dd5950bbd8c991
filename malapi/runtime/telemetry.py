"""Structured logging for HTTP round trips.

Events are emitted as short names with the details in ``extra`` so that a
JSON log formatter can pick them up as fields. Headers and bodies are never
logged since they may carry tokens.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(
    *,
    method: str,
    url: str,
    status: int,
    latency_ms: float,
) -> None:
    """Log a request that produced a response (any status)."""
    level = logging.DEBUG if 200 <= status < 300 else logging.WARNING
    logger.log(
        level,
        "http_request_completed",
        extra={
            "method": method,
            "url": url,
            "status": status,
            "latency_ms": round(latency_ms, 2),
        },
    )


def log_request_failed(*, method: str, url: str, error: BaseException) -> None:
    """Log a request that produced no response."""
    logger.warning(
        "http_request_failed",
        extra={
            "method": method,
            "url": url,
            "error": str(error),
            "error_type": type(error).__name__,
        },
    )
