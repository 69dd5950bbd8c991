"""User profile models."""

from __future__ import annotations

from .common import MALModel


class AnimeStatistics(MALModel):
    num_items_watching: int = 0
    num_items_completed: int = 0
    num_items_on_hold: int = 0
    num_items_dropped: int = 0
    num_items_plan_to_watch: int = 0
    num_items: int = 0
    num_days_watched: float = 0
    num_days_watching: float = 0
    num_days_completed: float = 0
    num_days_on_hold: float = 0
    num_days_dropped: float = 0
    num_days: float = 0
    num_episodes: int = 0
    num_times_rewatched: int = 0
    mean_score: float = 0


class UserInfo(MALModel):
    """Profile returned by ``/users/@me``."""

    id: int
    name: str
    picture: str | None = None
    gender: str | None = None
    birthday: str | None = None
    location: str | None = None
    joined_at: str | None = None
    anime_statistics: AnimeStatistics | None = None
    time_zone: str | None = None
    is_supporter: bool | None = None
