"""Response models for the MyAnimeList API.

Architecture:
    Every model is a frozen Pydantic v2 model that ignores unknown keys, so
    new fields added upstream never break parsing. Fields that only appear
    when requested through the ``fields`` selector default to ``None``.

Model Categories:
    - Catalog: Anime, Manga and their detail views
    - Lists: AnimeListStatus, MangaListStatus, list entries
    - Envelopes: Holder, Ranked, Related, Recommendation, PagedResponse
    - Forum: ForumCategory, ForumTopic, DetailedForumTopic
    - Account: UserInfo, TokenResponse, OAuthRequest
    - Errors: ErrorResponse
"""

from .anime import (
    Anime,
    AnimeListEntry,
    AnimeListStatus,
    Broadcast,
    Season,
    Statistics,
    Status,
    Studio,
)
from .auth import OAuthRequest, TokenResponse
from .common import (
    AlternativeTitles,
    Genre,
    Holder,
    MALModel,
    PagedResponse,
    Paging,
    Picture,
    Ranked,
    Ranking,
    Recommendation,
    Related,
)
from .details import DetailedAnime, DetailedManga
from .errors import ErrorResponse
from .forum import (
    DetailedForumTopic,
    ForumBoard,
    ForumCategory,
    ForumPost,
    ForumPostAuthor,
    ForumSubboard,
    ForumTopic,
    ForumTopicAuthor,
    ForumTopicPoll,
    ForumTopicPollOption,
)
from .manga import (
    Author,
    AuthorRole,
    Magazine,
    MagazineRole,
    Manga,
    MangaListEntry,
    MangaListStatus,
)
from .user import AnimeStatistics, UserInfo

__all__ = [
    "AlternativeTitles",
    "Anime",
    "AnimeListEntry",
    "AnimeListStatus",
    "AnimeStatistics",
    "Author",
    "AuthorRole",
    "Broadcast",
    "DetailedAnime",
    "DetailedForumTopic",
    "DetailedManga",
    "ErrorResponse",
    "ForumBoard",
    "ForumCategory",
    "ForumPost",
    "ForumPostAuthor",
    "ForumSubboard",
    "ForumTopic",
    "ForumTopicAuthor",
    "ForumTopicPoll",
    "ForumTopicPollOption",
    "Genre",
    "Holder",
    "MALModel",
    "Magazine",
    "MagazineRole",
    "Manga",
    "MangaListEntry",
    "MangaListStatus",
    "OAuthRequest",
    "PagedResponse",
    "Paging",
    "Picture",
    "Ranked",
    "Ranking",
    "Recommendation",
    "Related",
    "Season",
    "Statistics",
    "Status",
    "Studio",
    "TokenResponse",
    "UserInfo",
]
