"""Typed field selections.

These ``TypedDict``s list the optional fields each resource accepts in its
``fields`` selector. They are ordinary dicts at runtime, so a plain dict
literal works just as well; the types only help editors and type checkers.

Example:
    >>> from malapi.fields import AnimeFields
    >>> fields: AnimeFields = {"mean": True, "my_list_status": {"score": True}}
"""

from __future__ import annotations

from typing import TypedDict, Union


class AnimeListStatusFields(TypedDict, total=False):
    status: bool
    score: bool
    num_episodes_watched: bool
    is_rewatching: bool
    start_date: bool
    finish_date: bool
    priority: bool
    num_times_rewatched: bool
    rewatch_value: bool
    tags: bool
    comments: bool
    updated_at: bool


class AnimeFields(TypedDict, total=False):
    alternative_titles: bool
    start_date: bool
    end_date: bool
    synopsis: bool
    mean: bool
    rank: bool
    popularity: bool
    num_list_users: bool
    num_scoring_users: bool
    nsfw: bool
    genres: bool
    created_at: bool
    updated_at: bool
    media_type: bool
    status: bool
    my_list_status: Union[bool, AnimeListStatusFields]
    num_episodes: bool
    start_season: bool
    broadcast: bool
    source: bool
    average_episode_duration: bool
    rating: bool
    studios: bool


class DetailedAnimeFields(AnimeFields, total=False):
    pictures: bool
    background: bool
    related_anime: bool
    related_manga: bool
    recommendations: bool
    statistics: bool


class UserAnimeListFields(AnimeFields, total=False):
    list_status: Union[bool, AnimeListStatusFields]


class MangaListStatusFields(TypedDict, total=False):
    status: bool
    score: bool
    num_volumes_read: bool
    num_chapters_read: bool
    is_rereading: bool
    start_date: bool
    finish_date: bool
    priority: bool
    num_times_reread: bool
    reread_value: bool
    tags: bool
    comments: bool
    updated_at: bool


class MangaFields(TypedDict, total=False):
    alternative_titles: bool
    start_date: bool
    end_date: bool
    synopsis: bool
    mean: bool
    rank: bool
    popularity: bool
    num_list_users: bool
    num_scoring_users: bool
    nsfw: bool
    genres: bool
    created_at: bool
    updated_at: bool
    media_type: bool
    status: bool
    my_list_status: Union[bool, MangaListStatusFields]
    num_volumes: bool
    num_chapters: bool
    authors: bool


class DetailedMangaFields(MangaFields, total=False):
    pictures: bool
    background: bool
    related_anime: bool
    related_manga: bool
    recommendations: bool
    serialization: bool


class UserMangaListFields(MangaFields, total=False):
    list_status: Union[bool, MangaListStatusFields]


class UserInfoFields(TypedDict, total=False):
    id: bool
    name: bool
    picture: bool
    gender: bool
    birthday: bool
    location: bool
    joined_at: bool
    anime_statistics: bool
    time_zone: bool
    is_supporter: bool
