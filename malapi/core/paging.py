"""Cursor pagination.

Architecture:
    Paged responses carry their payload in ``data`` and two opaque cursor
    URLs in ``paging``. ``wrap_paged`` maps the payload to the caller-facing
    shape and turns each cursor that is present into a ``Continuation``.
    Awaiting a continuation performs one authenticated GET on the cursor
    URL and wraps the answer the same way, with the same map function and
    the same credentials, so a walk through all pages is just repeated
    ``await page.next(http)``.

Design Decisions:
    - Continuations hold only immutable data (url, map function, auth); the
      HTTP client is passed in when one is awaited
    - A missing cursor leaves the attribute ``None``; there is no no-op
      continuation and no end-of-list sentinel
    - No caching: awaiting the same continuation twice fetches twice
    - Failures come back as ErrorResponse, never raised
    - ``data`` is whatever the map function returns; a single object is as
      valid as a list
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from pydantic import ValidationError as PydanticValidationError

from ..models.common import PagedResponse, Paging
from ..models.errors import ErrorResponse
from .exceptions import APIError, TransportError
from .results import error_from_exception, invalid_response_error

if TYPE_CHECKING:
    from ..auth import AuthContext
    from ..runtime.http_client import HTTPResponse

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class SupportsGet(Protocol):
    """What a continuation needs from an HTTP client."""

    async def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse: ...


@dataclass(frozen=True)
class Continuation(Generic[R, T]):
    """Deferred fetch of the page behind one cursor URL."""

    url: str
    map: Callable[[R], T]
    auth: AuthContext
    direction: str = "next"

    async def __call__(self, http: SupportsGet) -> Paged[T] | ErrorResponse:
        """Fetch the page and wrap it.

        Args:
            http: Client used for the GET (``HTTPClient`` or compatible)

        Returns:
            The new page, or an ErrorResponse when the request fails
        """
        try:
            response = await http.get(self.url, headers=self.auth.headers())
            response.raise_for_status()
        except (APIError, TransportError) as e:
            _log_continuation(self.direction, self.url, ok=False)
            return error_from_exception(e)

        _log_continuation(self.direction, self.url, ok=True)
        try:
            return wrap_paged(response.body, self.map, self.auth)
        except PydanticValidationError as e:
            return invalid_response_error(response.status, e)


@dataclass(frozen=True)
class Paged(Generic[T]):
    """One page of results.

    ``previous``/``next`` are set only when the server returned the matching
    cursor; check them before awaiting.
    """

    data: T
    previous: Continuation[Any, T] | None = None
    next: Continuation[Any, T] | None = None


def wrap_paged(
    raw: Mapping[str, Any] | PagedResponse,
    map_fn: Callable[[R], T],
    auth: AuthContext,
) -> Paged[T]:
    """Wrap a raw paged body.

    Args:
        raw: Decoded ``{"data": ..., "paging": {...}}`` body
        map_fn: Turns the raw ``data`` into the caller-facing payload
        auth: Credentials used when a continuation is awaited

    Returns:
        Paged value with continuations mirroring the cursors in ``raw``

    Raises:
        pydantic.ValidationError: If ``raw`` is not a paged body or
            ``map_fn`` rejects the payload
    """
    response = raw if isinstance(raw, PagedResponse) else PagedResponse.model_validate(raw)
    paging = response.paging or Paging()
    return Paged(
        data=map_fn(response.data),
        previous=(
            Continuation(paging.previous, map_fn, auth, "previous")
            if paging.previous
            else None
        ),
        next=Continuation(paging.next, map_fn, auth, "next") if paging.next else None,
    )


def _log_continuation(direction: str, url: str, *, ok: bool) -> None:
    logger.debug(
        "page_continuation_fetched",
        extra={"direction": direction, "url": url, "ok": ok},
    )
