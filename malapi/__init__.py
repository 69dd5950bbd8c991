"""malapi - async client for the MyAnimeList v2 API."""

from .auth import AuthContext, OAuthClient, build_oauth_request, generate_code_verifier
from .client import MALClient
from .config import ClientConfig
from .core import (
    AnimeListSort,
    AnimeRankingType,
    AnimeWatchStatus,
    ConfigurationError,
    Continuation,
    FieldSpec,
    FieldSpecError,
    ForumSort,
    MALError,
    MangaListSort,
    MangaRankingType,
    MangaReadStatus,
    Paged,
    Result,
    SeasonalSort,
    SeasonName,
    ValidationError,
    is_error,
    serialize_fields,
    wrap_paged,
)
from .models import ErrorResponse, OAuthRequest, TokenResponse

__version__ = "0.1.0"

__all__ = [
    "AnimeListSort",
    "AnimeRankingType",
    "AnimeWatchStatus",
    "AuthContext",
    "ClientConfig",
    "ConfigurationError",
    "Continuation",
    "ErrorResponse",
    "FieldSpec",
    "FieldSpecError",
    "ForumSort",
    "MALClient",
    "MALError",
    "MangaListSort",
    "MangaRankingType",
    "MangaReadStatus",
    "OAuthClient",
    "OAuthRequest",
    "Paged",
    "Result",
    "SeasonName",
    "SeasonalSort",
    "TokenResponse",
    "ValidationError",
    "build_oauth_request",
    "generate_code_verifier",
    "is_error",
    "serialize_fields",
    "wrap_paged",
]
