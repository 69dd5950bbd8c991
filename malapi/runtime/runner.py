"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import APIError, ConfigurationError, TransportError
from ..core.paging import wrap_paged
from ..core.results import error_from_exception, invalid_response_error
from .http_client import HTTPClient

if TYPE_CHECKING:
    from ..auth import AuthContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "PATCH" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # Body is {"data": ..., "paging": {...}} and goes through wrap_paged
    paged: bool = False
    # Needs a bearer token; a client id alone is rejected by the API
    requires_user: bool = False


class ResponseAdapter:
    """Turns a decoded success body into the caller-facing value.

    Non-paged endpoints go through ``parse``. Paged endpoints only hand
    ``map`` the ``data`` member, and the same ``map`` is reused for every
    page reached through the continuations.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response

    def map(self, data: Any) -> Any:
        return data


class RestRunner:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        auth: AuthContext,
    ) -> Any:
        """Execute one endpoint call.

        Returns:
            The adapted value, a ``Paged`` for paged endpoints, or an
            ErrorResponse

        Raises:
            ConfigurationError: If the endpoint needs a user token and
                ``auth`` has none
        """
        if spec.requires_user and not auth.is_user:
            raise ConfigurationError(f"Endpoint '{spec.id}' requires an access token")

        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None

        try:
            response = await self._http.request(
                spec.method, path, params=query, data=body, headers=auth.headers()
            )
            response.raise_for_status()
        except (APIError, TransportError) as e:
            logger.debug("Endpoint %s failed: %s", spec.id, e)
            return error_from_exception(e)

        try:
            if spec.paged:
                return wrap_paged(response.body, adapter.map, auth)
            return adapter.parse(response.body, params)
        except PydanticValidationError as e:
            logger.warning("Endpoint %s returned an unexpected body: %s", spec.id, e)
            return invalid_response_error(response.status, e)
