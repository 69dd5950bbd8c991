"""Detail views of anime and manga.

Detail responses cross-reference each other (an anime lists related manga
and the other way round), so they live apart from the list models.
"""

from __future__ import annotations

from .anime import Anime, Statistics
from .common import Picture, Recommendation, Related
from .manga import MagazineRole, Manga


class DetailedAnime(Anime):
    """Anime as returned by ``/anime/{id}``."""

    pictures: list[Picture] | None = None
    background: str | None = None
    related_anime: list[Related[Anime]] | None = None
    related_manga: list[Related[Manga]] | None = None
    recommendations: list[Recommendation[Anime]] | None = None
    statistics: Statistics | None = None


class DetailedManga(Manga):
    """Manga as returned by ``/manga/{id}``."""

    pictures: list[Picture] | None = None
    background: str | None = None
    related_anime: list[Related[Anime]] | None = None
    related_manga: list[Related[Manga]] | None = None
    recommendations: list[Recommendation[Manga]] | None = None
    serialization: list[MagazineRole] | None = None
