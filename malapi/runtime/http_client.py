"""Async HTTP client wrapper."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import aiohttp

from ..core.exceptions import APIError, TransportError
from .telemetry import log_request_completed, log_request_failed


@dataclass(frozen=True)
class HTTPResponse:
    """Status and decoded JSON body of a completed request.

    ``body`` is None for an empty body and the raw text when the body is
    not JSON.
    """

    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def raise_for_status(self) -> None:
        """Raise APIError for a non-success status."""
        if self.ok:
            return
        error = None
        message = f"HTTP {self.status}"
        if isinstance(self.body, dict):
            error = self.body.get("error")
            message = str(self.body.get("message") or message)
        raise APIError(message, status_code=self.status, error=error, body=self.body)


class HTTPClient:
    """Async HTTP client wrapper.

    Non-success statuses come back as ``HTTPResponse`` values; only a
    request that never got a response raises (``TransportError``).
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Send a request and decode the JSON body.

        Args:
            method: HTTP method
            url: Absolute URL, or a path joined to ``base_url``
            params: Query parameters
            data: Form fields, sent as ``application/x-www-form-urlencoded``
            headers: Extra request headers

        Raises:
            TransportError: If the request could not be completed
        """
        url = self.resolve_url(url)
        started = time.perf_counter()
        try:
            async with self.session.request(
                method,
                url,
                params=dict(params) if params else None,
                data=dict(data) if data is not None else None,
                headers=dict(headers) if headers else None,
            ) as response:
                body = await _read_body(response)
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log_request_failed(method=method, url=url, error=e)
            raise TransportError(str(e) or type(e).__name__, url=url) from e

        log_request_completed(
            method=method,
            url=url,
            status=status,
            latency_ms=(time.perf_counter() - started) * 1000,
        )
        return HTTPResponse(status=status, body=body)

    async def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """POST request with a form body."""
        return await self.request("POST", url, data=data, headers=headers)

    async def patch(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """PATCH request with a form body."""
        return await self.request("PATCH", url, data=data, headers=headers)

    async def delete(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """DELETE request."""
        return await self.request("DELETE", url, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


async def _read_body(response: aiohttp.ClientResponse) -> Any:
    raw = await response.read()
    if not raw:
        return None
    # Undecodable bytes are replaced so the status always reaches the caller
    try:
        text = raw.decode(response.charset or "utf-8", errors="replace")
    except LookupError:
        text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text
