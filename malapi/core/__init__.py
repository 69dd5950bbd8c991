"""Core components."""

from .enums import (
    AnimeListSort,
    AnimeRankingType,
    AnimeWatchStatus,
    ForumSort,
    MangaListSort,
    MangaRankingType,
    MangaReadStatus,
    SeasonalSort,
    SeasonName,
)
from .exceptions import (
    APIError,
    ConfigurationError,
    FieldSpecError,
    MALError,
    TransportError,
    ValidationError,
)
from .selector import FieldsArg, FieldSpec, as_field_spec, fields_param, serialize_fields
from .results import (
    Result,
    error_from_exception,
    is_error,
    no_response_error,
)
from .paging import Continuation, Paged, wrap_paged

__all__ = [
    "APIError",
    "AnimeListSort",
    "AnimeRankingType",
    "AnimeWatchStatus",
    "ConfigurationError",
    "Continuation",
    "FieldSpec",
    "FieldsArg",
    "FieldSpecError",
    "ForumSort",
    "MALError",
    "MangaListSort",
    "MangaRankingType",
    "MangaReadStatus",
    "Paged",
    "Result",
    "SeasonName",
    "SeasonalSort",
    "TransportError",
    "ValidationError",
    "as_field_spec",
    "error_from_exception",
    "fields_param",
    "is_error",
    "no_response_error",
    "serialize_fields",
    "wrap_paged",
]
