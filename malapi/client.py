"""MyAnimeList API client.

Architecture:
    ``MALClient`` is a thin facade: each method gathers its arguments into a
    params dict and hands an endpoint spec plus adapter to the
    ``RestRunner``. The runner performs the single HTTP call and either
    adapts the body, wraps it as a ``Paged`` value, or converts the failure
    into an ``ErrorResponse``.

Design Decisions:
    - Errors are values: every API method returns ``T | ErrorResponse``
    - Argument mistakes (bad ids, out of range limits, missing token for a
      user endpoint) raise before any request is sent
    - Pages keep no reference to the client; ``next_page``/``previous_page``
      pass this client's HTTP session to the page's continuation

Example:
    >>> async with MALClient(client_id="...") as mal:
    ...     page = await mal.get_anime_list("frieren", limit=5, fields={"mean": True})
    ...     if not is_error(page):
    ...         for anime in page.data:
    ...             print(anime.title, anime.mean)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable
from typing import Any, TypeVar

from .auth import AuthContext
from .config import API_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .core.enums import (
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
from .core.paging import Paged
from .core.results import is_error
from .core.selector import FieldsArg
from .endpoints import anime, forum, manga, user
from .models import (
    Anime,
    AnimeListEntry,
    AnimeListStatus,
    DetailedAnime,
    DetailedForumTopic,
    DetailedManga,
    ErrorResponse,
    ForumCategory,
    ForumTopic,
    Manga,
    MangaListEntry,
    MangaListStatus,
    Ranked,
    UserInfo,
)
from .runtime.http_client import HTTPClient
from .runtime.runner import ResponseAdapter, RestEndpointSpec, RestRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MALClient:
    """Async client for the MyAnimeList v2 API.

    Args:
        client_id: Application client id, enough for public endpoints
        access_token: OAuth bearer token, needed for list updates,
            suggestions and ``get_user_info``
        base_url: API root
        timeout: Total timeout per request in seconds
        http: Shared HTTPClient; the client closes only one it created
    """

    def __init__(
        self,
        client_id: str | None = None,
        access_token: str | None = None,
        *,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http: HTTPClient | None = None,
    ) -> None:
        self.auth = AuthContext(client_id=client_id, access_token=access_token)
        self._owns_http = http is None
        self.http = http or HTTPClient(base_url=base_url, timeout=timeout)
        self._runner = RestRunner(self.http)

    @classmethod
    def from_config(cls, config: ClientConfig, http: HTTPClient | None = None) -> MALClient:
        return cls(
            client_id=config.client_id,
            access_token=config.access_token,
            base_url=config.base_url,
            timeout=config.timeout,
            http=http,
        )

    @classmethod
    def from_env(cls) -> MALClient:
        """Client configured from ``MAL_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env())

    def set_access_token(self, access_token: str | None) -> None:
        """Switch to (or drop) a user token for subsequent calls.

        Pages fetched earlier keep the credentials they were created with.
        """
        self.auth = self.auth.with_token(access_token)

    async def _run(
        self, spec: RestEndpointSpec, adapter: ResponseAdapter, **params: Any
    ) -> Any:
        return await self._runner.run(spec=spec, adapter=adapter, params=params, auth=self.auth)

    # Anime

    async def get_anime_list(
        self,
        q: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
        nsfw: bool | None = None,
    ) -> Paged[list[Anime]] | ErrorResponse:
        """Search anime by title."""
        return await self._run(
            anime.ANIME_LIST,
            anime.anime_nodes,
            q=q,
            limit=limit,
            offset=offset,
            fields=fields,
            nsfw=nsfw,
        )

    async def get_anime_details(
        self, anime_id: int, *, fields: FieldsArg = None
    ) -> DetailedAnime | ErrorResponse:
        return await self._run(
            anime.ANIME_DETAILS, anime.detailed_anime, anime_id=anime_id, fields=fields
        )

    async def get_anime_ranking(
        self,
        ranking_type: AnimeRankingType | str = AnimeRankingType.ALL,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
    ) -> Paged[list[Ranked[Anime]]] | ErrorResponse:
        return await self._run(
            anime.ANIME_RANKING,
            anime.ranked_anime,
            ranking_type=ranking_type,
            limit=limit,
            offset=offset,
            fields=fields,
        )

    async def get_seasonal_anime(
        self,
        year: int,
        season: SeasonName | str,
        *,
        sort: SeasonalSort | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
        nsfw: bool | None = None,
    ) -> Paged[list[Anime]] | ErrorResponse:
        return await self._run(
            anime.SEASONAL_ANIME,
            anime.anime_nodes,
            year=year,
            season=season,
            sort=sort,
            limit=limit,
            offset=offset,
            fields=fields,
            nsfw=nsfw,
        )

    async def get_suggested_anime(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
        nsfw: bool | None = None,
    ) -> Paged[list[Anime]] | ErrorResponse:
        """Suggestions for the authenticated user."""
        return await self._run(
            anime.SUGGESTED_ANIME,
            anime.anime_nodes,
            limit=limit,
            offset=offset,
            fields=fields,
            nsfw=nsfw,
        )

    async def update_anime_list_status(
        self,
        anime_id: int,
        *,
        status: AnimeWatchStatus | str | None = None,
        is_rewatching: bool | None = None,
        score: int | None = None,
        num_watched_episodes: int | None = None,
        priority: int | None = None,
        num_times_rewatched: int | None = None,
        rewatch_value: int | None = None,
        tags: Iterable[str] | None = None,
        comments: str | None = None,
    ) -> AnimeListStatus | ErrorResponse:
        """Add an anime to the user's list or change its entry.

        Only the arguments given are sent; the rest of the entry is left
        untouched.
        """
        return await self._run(
            anime.UPDATE_ANIME_LIST_STATUS,
            anime.anime_list_status,
            anime_id=anime_id,
            status=status,
            is_rewatching=is_rewatching,
            score=score,
            num_watched_episodes=num_watched_episodes,
            priority=priority,
            num_times_rewatched=num_times_rewatched,
            rewatch_value=rewatch_value,
            tags=list(tags) if tags is not None else None,
            comments=comments,
        )

    async def delete_anime_list_status(self, anime_id: int) -> None | ErrorResponse:
        """Remove an anime from the user's list. A missing entry gives a 404 error."""
        return await self._run(
            anime.DELETE_ANIME_LIST_STATUS, anime.deleted, anime_id=anime_id
        )

    async def get_user_anime_list(
        self,
        user_name: str = "@me",
        *,
        status: AnimeWatchStatus | str | None = None,
        sort: AnimeListSort | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
        nsfw: bool | None = None,
    ) -> Paged[list[AnimeListEntry]] | ErrorResponse:
        return await self._run(
            anime.USER_ANIME_LIST,
            anime.anime_list_entries,
            user_name=user_name,
            status=status,
            sort=sort,
            limit=limit,
            offset=offset,
            fields=fields,
            nsfw=nsfw,
        )

    # Manga

    async def get_manga_list(
        self,
        q: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
        nsfw: bool | None = None,
    ) -> Paged[list[Manga]] | ErrorResponse:
        """Search manga by title."""
        return await self._run(
            manga.MANGA_LIST,
            manga.manga_nodes,
            q=q,
            limit=limit,
            offset=offset,
            fields=fields,
            nsfw=nsfw,
        )

    async def get_manga_details(
        self, manga_id: int, *, fields: FieldsArg = None
    ) -> DetailedManga | ErrorResponse:
        return await self._run(
            manga.MANGA_DETAILS, manga.detailed_manga, manga_id=manga_id, fields=fields
        )

    async def get_manga_ranking(
        self,
        ranking_type: MangaRankingType | str = MangaRankingType.ALL,
        *,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
    ) -> Paged[list[Ranked[Manga]]] | ErrorResponse:
        return await self._run(
            manga.MANGA_RANKING,
            manga.ranked_manga,
            ranking_type=ranking_type,
            limit=limit,
            offset=offset,
            fields=fields,
        )

    async def update_manga_list_status(
        self,
        manga_id: int,
        *,
        status: MangaReadStatus | str | None = None,
        is_rereading: bool | None = None,
        score: int | None = None,
        num_volumes_read: int | None = None,
        num_chapters_read: int | None = None,
        priority: int | None = None,
        num_times_reread: int | None = None,
        reread_value: int | None = None,
        tags: Iterable[str] | None = None,
        comments: str | None = None,
    ) -> MangaListStatus | ErrorResponse:
        return await self._run(
            manga.UPDATE_MANGA_LIST_STATUS,
            manga.manga_list_status,
            manga_id=manga_id,
            status=status,
            is_rereading=is_rereading,
            score=score,
            num_volumes_read=num_volumes_read,
            num_chapters_read=num_chapters_read,
            priority=priority,
            num_times_reread=num_times_reread,
            reread_value=reread_value,
            tags=list(tags) if tags is not None else None,
            comments=comments,
        )

    async def delete_manga_list_status(self, manga_id: int) -> None | ErrorResponse:
        return await self._run(
            manga.DELETE_MANGA_LIST_STATUS, manga.deleted, manga_id=manga_id
        )

    async def get_user_manga_list(
        self,
        user_name: str = "@me",
        *,
        status: MangaReadStatus | str | None = None,
        sort: MangaListSort | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        fields: FieldsArg = None,
        nsfw: bool | None = None,
    ) -> Paged[list[MangaListEntry]] | ErrorResponse:
        return await self._run(
            manga.USER_MANGA_LIST,
            manga.manga_list_entries,
            user_name=user_name,
            status=status,
            sort=sort,
            limit=limit,
            offset=offset,
            fields=fields,
            nsfw=nsfw,
        )

    # User

    async def get_user_info(self, *, fields: FieldsArg = None) -> UserInfo | ErrorResponse:
        """Profile of the authenticated user."""
        return await self._run(user.USER_INFO, user.user_info, fields=fields)

    # Forum

    async def get_forum_boards(self) -> list[ForumCategory] | ErrorResponse:
        return await self._run(forum.FORUM_BOARDS, forum.forum_categories)

    async def get_forum_topic(
        self,
        topic_id: int,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[DetailedForumTopic] | ErrorResponse:
        """Posts of a topic. ``data`` is one topic object, paged over its posts."""
        return await self._run(
            forum.FORUM_TOPIC, forum.forum_topic, topic_id=topic_id, limit=limit, offset=offset
        )

    async def get_forum_topics(
        self,
        *,
        board_id: int | None = None,
        subboard_id: int | None = None,
        q: str | None = None,
        topic_user_name: str | None = None,
        user_name: str | None = None,
        sort: ForumSort | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Paged[list[ForumTopic]] | ErrorResponse:
        return await self._run(
            forum.FORUM_TOPICS,
            forum.forum_topics,
            board_id=board_id,
            subboard_id=subboard_id,
            q=q,
            topic_user_name=topic_user_name,
            user_name=user_name,
            sort=sort,
            limit=limit,
            offset=offset,
        )

    # Paging

    async def next_page(self, page: Paged[T]) -> Paged[T] | ErrorResponse | None:
        """Fetch the page after ``page``; None when there is none."""
        if page.next is None:
            return None
        return await page.next(self.http)

    async def previous_page(self, page: Paged[T]) -> Paged[T] | ErrorResponse | None:
        """Fetch the page before ``page``; None when there is none."""
        if page.previous is None:
            return None
        return await page.previous(self.http)

    async def iter_pages(
        self, page: Paged[T] | ErrorResponse
    ) -> AsyncIterator[Paged[T] | ErrorResponse]:
        """Yield ``page`` and every page after it.

        Stops after the last page, or after yielding an ErrorResponse.
        Each page is fetched only when the iteration reaches it.
        """
        current: Paged[T] | ErrorResponse | None = page
        while current is not None:
            yield current
            if is_error(current):
                logger.debug("Stopping page iteration on error %s", current.error)
                return
            current = await self.next_page(current)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_http:
            await self.http.close()

    async def __aenter__(self) -> MALClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
