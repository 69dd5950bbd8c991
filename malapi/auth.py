"""Authentication: request headers and the OAuth2 authorization code flow.

Architecture:
    Public endpoints identify the application with the ``X-MAL-CLIENT-ID``
    header. Anything touching a user's data needs a bearer token obtained
    through OAuth2 with PKCE:

    1. ``build_oauth_request`` produces the authorize URL and a code verifier
    2. the user approves and is redirected back with ``?code=...``
    3. ``OAuthClient.exchange_code`` trades code + verifier for tokens
    4. ``OAuthClient.refresh_token`` renews them later

Design Decisions:
    - MyAnimeList only implements the ``plain`` challenge method, so the
      challenge sent is the verifier itself
    - Token calls return ``TokenResponse | ErrorResponse`` like every other
      call; nothing from the network is raised
"""

from __future__ import annotations

import secrets
import string
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlencode

from pydantic import ValidationError as PydanticValidationError

from .config import (
    CLIENT_ID_HEADER,
    DEFAULT_TIMEOUT,
    OAUTH_AUTHORIZE_URL,
    OAUTH_TOKEN_URL,
    ClientConfig,
)
from .core.exceptions import APIError, ConfigurationError, TransportError, ValidationError
from .core.results import error_from_exception, invalid_response_error
from .models import ErrorResponse, OAuthRequest, TokenResponse
from .runtime.http_client import HTTPClient

# RFC 7636 unreserved characters
_VERIFIER_ALPHABET = string.ascii_letters + string.digits + "-._~"
VERIFIER_MIN_LENGTH = 43
VERIFIER_MAX_LENGTH = 128


@dataclass(frozen=True)
class AuthContext:
    """Credentials attached to each request.

    A bearer token takes precedence over the client id.
    """

    client_id: str | None = None
    access_token: str | None = None

    def __post_init__(self) -> None:
        if not self.client_id and not self.access_token:
            raise ConfigurationError("Either client_id or access_token must be provided")

    @property
    def is_user(self) -> bool:
        """True when requests act on behalf of a user."""
        return bool(self.access_token)

    def headers(self) -> dict[str, str]:
        if self.access_token:
            return {"Authorization": f"Bearer {self.access_token}"}
        return {CLIENT_ID_HEADER: self.client_id or ""}

    def with_token(self, access_token: str | None) -> AuthContext:
        """Copy with a new (or no) access token."""
        return AuthContext(client_id=self.client_id, access_token=access_token)

    def __repr__(self) -> str:
        token = "***" if self.access_token else None
        return f"AuthContext(client_id={self.client_id!r}, access_token={token!r})"


def generate_code_verifier(length: int = VERIFIER_MAX_LENGTH) -> str:
    """Random PKCE code verifier.

    Args:
        length: Number of characters, 43 to 128

    Raises:
        ValidationError: If length is out of range
    """
    if not VERIFIER_MIN_LENGTH <= length <= VERIFIER_MAX_LENGTH:
        raise ValidationError(
            f"Code verifier length must be between {VERIFIER_MIN_LENGTH} "
            f"and {VERIFIER_MAX_LENGTH}, got {length}"
        )
    return "".join(secrets.choice(_VERIFIER_ALPHABET) for _ in range(length))


def build_oauth_request(
    client_id: str,
    redirect_uri: str | None = None,
    state: str | None = None,
    code_verifier: str | None = None,
) -> OAuthRequest:
    """Build the URL the user must visit to authorize the application.

    Args:
        client_id: Application client id
        redirect_uri: Must match one registered for the application; may be
            omitted when only one is registered
        state: Opaque value echoed back on redirect
        code_verifier: Reuse a verifier instead of generating one

    Returns:
        OAuthRequest with the URL and the verifier to keep for
        ``OAuthClient.exchange_code``
    """
    if not client_id:
        raise ConfigurationError("client_id is required for the OAuth flow")
    verifier = code_verifier or generate_code_verifier()
    params = {
        "response_type": "code",
        "client_id": client_id,
        "code_challenge": verifier,
        "code_challenge_method": "plain",
    }
    if redirect_uri:
        params["redirect_uri"] = redirect_uri
    if state:
        params["state"] = state
    return OAuthRequest(
        url=f"{OAUTH_AUTHORIZE_URL}?{urlencode(params)}",
        code_verifier=verifier,
        state=state,
    )


class OAuthClient:
    """Token endpoint calls for the authorization code flow."""

    def __init__(
        self,
        client_id: str,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        *,
        http: HTTPClient | None = None,
        token_url: str = OAUTH_TOKEN_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not client_id:
            raise ConfigurationError("client_id is required for the OAuth flow")
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.token_url = token_url
        self._owns_http = http is None
        self._http = http or HTTPClient(timeout=timeout)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        redirect_uri: str | None = None,
        http: HTTPClient | None = None,
    ) -> OAuthClient:
        """OAuth client using the id, secret and timeout of ``config``."""
        return cls(
            config.client_id or "",
            config.client_secret,
            redirect_uri=redirect_uri,
            http=http,
            timeout=config.timeout,
        )

    def authorization_request(
        self, state: str | None = None, code_verifier: str | None = None
    ) -> OAuthRequest:
        return build_oauth_request(
            self.client_id,
            redirect_uri=self.redirect_uri,
            state=state,
            code_verifier=code_verifier,
        )

    async def exchange_code(
        self,
        code: str,
        code_verifier: str,
        redirect_uri: str | None = None,
    ) -> TokenResponse | ErrorResponse:
        """Trade an authorization code for tokens."""
        form = {
            "grant_type": "authorization_code",
            "code": code,
            "code_verifier": code_verifier,
        }
        redirect = redirect_uri or self.redirect_uri
        if redirect:
            form["redirect_uri"] = redirect
        return await self._token_request(form)

    async def refresh_token(self, refresh_token: str) -> TokenResponse | ErrorResponse:
        """Get a new access token from a refresh token."""
        return await self._token_request(
            {"grant_type": "refresh_token", "refresh_token": refresh_token}
        )

    async def _token_request(self, form: Mapping[str, str]) -> TokenResponse | ErrorResponse:
        data = {"client_id": self.client_id, **form}
        if self.client_secret:
            data["client_secret"] = self.client_secret
        try:
            response = await self._http.post(self.token_url, data=data)
            response.raise_for_status()
        except (APIError, TransportError) as e:
            return error_from_exception(e)
        try:
            return TokenResponse.model_validate(response.body)
        except PydanticValidationError as e:
            return invalid_response_error(response.status, e)

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> OAuthClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
