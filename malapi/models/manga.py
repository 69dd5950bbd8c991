"""Manga response models."""

from __future__ import annotations

from pydantic import Field

from .common import (
    AlternativeTitles,
    Genre,
    Holder,
    MALModel,
    Picture,
)


class MangaListStatus(MALModel):
    status: str | None = None
    score: int | None = None
    num_volumes_read: int | None = None
    num_chapters_read: int | None = None
    is_rereading: bool | None = None
    start_date: str | None = None
    finish_date: str | None = None
    priority: int | None = None
    num_times_reread: int | None = None
    reread_value: int | None = None
    tags: list[str] = Field(default_factory=list)
    comments: str | None = None
    updated_at: str | None = None


class Author(MALModel):
    id: int
    first_name: str = ""
    last_name: str = ""


class AuthorRole(Holder[Author]):
    role: str


class Magazine(MALModel):
    id: int
    name: str


class MagazineRole(Holder[Magazine]):
    role: str | None = None


class Manga(MALModel):
    """Manga as returned by list and ranking endpoints."""

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
    my_list_status: MangaListStatus | None = None
    num_volumes: int | None = None
    num_chapters: int | None = None
    authors: list[AuthorRole] | None = None


class MangaListEntry(Holder[Manga]):
    """Entry of a user's manga list."""

    list_status: MangaListStatus | None = None
