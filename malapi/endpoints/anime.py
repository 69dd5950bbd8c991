"""Anime endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from ..core.enums import AnimeRankingType
from ..models import Anime, AnimeListEntry, AnimeListStatus, DetailedAnime, Ranked
from ..runtime.runner import RestEndpointSpec
from .common import (
    EmptyAdapter,
    ListAdapter,
    ModelAdapter,
    NodeListAdapter,
    check_range,
    compact,
    fields_query,
    paged_query,
    require_id,
    require_query,
    user_path,
    wire_value,
)


def build_list_status_body(params: dict[str, Any]) -> dict[str, Any]:
    """Form body for PATCH my_list_status; only the given keys are sent."""
    body = compact(
        {
            "status": params.get("status"),
            "is_rewatching": params.get("is_rewatching"),
            "score": params.get("score"),
            "num_watched_episodes": params.get("num_watched_episodes"),
            "priority": params.get("priority"),
            "num_times_rewatched": params.get("num_times_rewatched"),
            "rewatch_value": params.get("rewatch_value"),
            "tags": params.get("tags"),
            "comments": params.get("comments"),
        }
    )
    check_range(body, "score", 0, 10)
    check_range(body, "priority", 0, 2)
    check_range(body, "rewatch_value", 0, 5)
    return body


ANIME_LIST = RestEndpointSpec(
    id="anime_list",
    method="GET",
    build_path=lambda p: "/anime",
    build_query=lambda p: paged_query(
        "anime_list", p, {"q": require_query(p), "nsfw": p.get("nsfw")}
    ),
    paged=True,
)

ANIME_DETAILS = RestEndpointSpec(
    id="anime_details",
    method="GET",
    build_path=lambda p: f"/anime/{require_id(p, 'anime_id')}",
    build_query=fields_query,
)

ANIME_RANKING = RestEndpointSpec(
    id="anime_ranking",
    method="GET",
    build_path=lambda p: "/anime/ranking",
    build_query=lambda p: paged_query(
        "anime_ranking",
        p,
        {"ranking_type": p.get("ranking_type") or AnimeRankingType.ALL},
    ),
    paged=True,
)

SEASONAL_ANIME = RestEndpointSpec(
    id="seasonal_anime",
    method="GET",
    build_path=lambda p: f"/anime/season/{int(p['year'])}/{wire_value(p['season'])}",
    build_query=lambda p: paged_query(
        "seasonal_anime", p, {"sort": p.get("sort"), "nsfw": p.get("nsfw")}
    ),
    paged=True,
)

SUGGESTED_ANIME = RestEndpointSpec(
    id="suggested_anime",
    method="GET",
    build_path=lambda p: "/anime/suggestions",
    build_query=lambda p: paged_query("suggested_anime", p, {"nsfw": p.get("nsfw")}),
    paged=True,
    requires_user=True,
)

UPDATE_ANIME_LIST_STATUS = RestEndpointSpec(
    id="update_anime_list_status",
    method="PATCH",
    build_path=lambda p: f"/anime/{require_id(p, 'anime_id')}/my_list_status",
    build_body=build_list_status_body,
    requires_user=True,
)

DELETE_ANIME_LIST_STATUS = RestEndpointSpec(
    id="delete_anime_list_status",
    method="DELETE",
    build_path=lambda p: f"/anime/{require_id(p, 'anime_id')}/my_list_status",
    requires_user=True,
)

USER_ANIME_LIST = RestEndpointSpec(
    id="user_anime_list",
    method="GET",
    build_path=lambda p: user_path(p, "animelist"),
    build_query=lambda p: paged_query(
        "user_anime_list",
        p,
        {"status": p.get("status"), "sort": p.get("sort"), "nsfw": p.get("nsfw")},
    ),
    paged=True,
)


anime_nodes = NodeListAdapter(Anime)
ranked_anime = ListAdapter(Ranked[Anime])
detailed_anime = ModelAdapter(DetailedAnime)
anime_list_status = ModelAdapter(AnimeListStatus)
anime_list_entries = ListAdapter(AnimeListEntry)
deleted = EmptyAdapter()
