"""Shared MyAnimeList API constants and client settings.

This module centralizes URLs, header names and per-endpoint limits so the
endpoint modules can stay small and declarative.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .core.exceptions import ConfigurationError

API_BASE_URL = "https://api.myanimelist.net/v2"
OAUTH_AUTHORIZE_URL = "https://myanimelist.net/v1/oauth2/authorize"
OAUTH_TOKEN_URL = "https://myanimelist.net/v1/oauth2/token"

CLIENT_ID_HEADER = "X-MAL-CLIENT-ID"
DEFAULT_TIMEOUT = 30.0

# Largest ``limit`` each listing accepts
MAX_LIMITS = {
    "anime_list": 100,
    "anime_ranking": 500,
    "seasonal_anime": 500,
    "suggested_anime": 100,
    "user_anime_list": 1000,
    "manga_list": 100,
    "manga_ranking": 500,
    "user_manga_list": 1000,
    "forum_topic": 100,
    "forum_topics": 100,
}


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and transport settings for MALClient.

    Either ``client_id`` or ``access_token`` is required. Public endpoints
    accept the client id alone; list updates and ``@me`` need a token.
    """

    client_id: str | None = None
    client_secret: str | None = None
    access_token: str | None = None
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.client_id and not self.access_token:
            raise ConfigurationError("Either client_id or access_token must be provided")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build settings from ``MAL_*`` environment variables.

        Reads MAL_CLIENT_ID, MAL_CLIENT_SECRET, MAL_ACCESS_TOKEN,
        MAL_API_BASE_URL and MAL_TIMEOUT.
        """
        env = os.environ if environ is None else environ
        timeout = env.get("MAL_TIMEOUT")
        try:
            parsed_timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"MAL_TIMEOUT is not a number: {timeout!r}") from e
        return cls(
            client_id=env.get("MAL_CLIENT_ID") or None,
            client_secret=env.get("MAL_CLIENT_SECRET") or None,
            access_token=env.get("MAL_ACCESS_TOKEN") or None,
            base_url=env.get("MAL_API_BASE_URL") or API_BASE_URL,
            timeout=parsed_timeout,
        )
