"""Anime response models."""

from __future__ import annotations

from pydantic import Field

from .common import (
    AlternativeTitles,
    Genre,
    Holder,
    MALModel,
    Picture,
)


class AnimeListStatus(MALModel):
    """The authenticated user's (or a listed user's) entry for an anime."""

    status: str | None = None
    score: int | None = None
    num_episodes_watched: int | None = None
    is_rewatching: bool | None = None
    start_date: str | None = None
    finish_date: str | None = None
    priority: int | None = None
    num_times_rewatched: int | None = None
    rewatch_value: int | None = None
    tags: list[str] = Field(default_factory=list)
    comments: str | None = None
    updated_at: str | None = None


class Season(MALModel):
    year: int
    season: str


class Broadcast(MALModel):
    day_of_the_week: str
    start_time: str | None = None


class Studio(MALModel):
    id: int
    name: str


class Status(MALModel):
    watching: int
    completed: int
    on_hold: int
    dropped: int
    plan_to_watch: int


class Statistics(MALModel):
    num_list_users: int
    status: Status


class Anime(MALModel):
    """Anime as returned by list, ranking and seasonal endpoints.

    Only ``id`` and ``title`` are always present; everything else depends on
    the ``fields`` selector sent with the request.
    """

    id: int
    title: str
    main_picture: Picture | None = None
    alternative_titles: AlternativeTitles | None = None
    start_date: str | None = None
    end_date: str | None = None
    synopsis: str | None = None
    mean: float | None = None
    rank: int | None = None
    popularity: int | None = None
    num_list_users: int | None = None
    num_scoring_users: int | None = None
    nsfw: str | None = None
    genres: list[Genre] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    media_type: str | None = None
    status: str | None = None
    my_list_status: AnimeListStatus | None = None
    num_episodes: int | None = None
    start_season: Season | None = None
    broadcast: Broadcast | None = None
    source: str | None = None
    average_episode_duration: int | None = None
    rating: str | None = None
    studios: list[Studio] | None = None


class AnimeListEntry(Holder[Anime]):
    """Entry of a user's anime list."""

    list_status: AnimeListStatus | None = None
