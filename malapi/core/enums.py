"""Enumerations for request parameters accepted by the MyAnimeList API.

Architecture:
    The API takes a fixed vocabulary of strings for rankings, seasons, list
    statuses and sort orders. These enums give those strings names while
    staying plain ``str`` values, so they drop straight into query strings
    and form bodies.

Design Decisions:
    - String enums: ``str(member)`` is the wire value
    - Request side only: response models keep raw strings so that a value
      added upstream does not break parsing
"""

from enum import Enum


class _WireEnum(str, Enum):
    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class AnimeRankingType(_WireEnum):
    """Ranking lists available from ``/anime/ranking``."""

    ALL = "all"
    AIRING = "airing"
    UPCOMING = "upcoming"
    TV = "tv"
    OVA = "ova"
    MOVIE = "movie"
    SPECIAL = "special"
    BY_POPULARITY = "bypopularity"
    FAVORITE = "favorite"


class MangaRankingType(_WireEnum):
    """Ranking lists available from ``/manga/ranking``."""

    ALL = "all"
    MANGA = "manga"
    NOVELS = "novels"
    ONE_SHOTS = "oneshots"
    DOUJIN = "doujin"
    MANHWA = "manhwa"
    MANHUA = "manhua"
    BY_POPULARITY = "bypopularity"
    FAVORITE = "favorite"


class SeasonName(_WireEnum):
    """Broadcast season. Winter covers January to March."""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"

    @classmethod
    def from_month(cls, month: int) -> "SeasonName":
        """Season that contains the given calendar month (1-12)."""
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")
        return (cls.WINTER, cls.SPRING, cls.SUMMER, cls.FALL)[(month - 1) // 3]


class SeasonalSort(_WireEnum):
    ANIME_SCORE = "anime_score"
    ANIME_NUM_LIST_USERS = "anime_num_list_users"


class AnimeWatchStatus(_WireEnum):
    WATCHING = "watching"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"
    PLAN_TO_WATCH = "plan_to_watch"


class MangaReadStatus(_WireEnum):
    READING = "reading"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"
    PLAN_TO_READ = "plan_to_read"


class AnimeListSort(_WireEnum):
    """Sort orders for a user's anime list."""

    LIST_SCORE = "list_score"
    LIST_UPDATED_AT = "list_updated_at"
    ANIME_TITLE = "anime_title"
    ANIME_START_DATE = "anime_start_date"
    ANIME_ID = "anime_id"


class MangaListSort(_WireEnum):
    """Sort orders for a user's manga list."""

    LIST_SCORE = "list_score"
    LIST_UPDATED_AT = "list_updated_at"
    MANGA_TITLE = "manga_title"
    MANGA_START_DATE = "manga_start_date"
    MANGA_ID = "manga_id"


class ForumSort(_WireEnum):
    RECENT = "recent"
