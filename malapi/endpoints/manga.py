"""Manga endpoint definitions and adapters.

Mirrors the anime endpoints, minus seasons and suggestions.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import MangaRankingType
from ..models import DetailedManga, Manga, MangaListEntry, MangaListStatus, Ranked
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
)


def build_list_status_body(params: dict[str, Any]) -> dict[str, Any]:
    body = compact(
        {
            "status": params.get("status"),
            "is_rereading": params.get("is_rereading"),
            "score": params.get("score"),
            "num_volumes_read": params.get("num_volumes_read"),
            "num_chapters_read": params.get("num_chapters_read"),
            "priority": params.get("priority"),
            "num_times_reread": params.get("num_times_reread"),
            "reread_value": params.get("reread_value"),
            "tags": params.get("tags"),
            "comments": params.get("comments"),
        }
    )
    check_range(body, "score", 0, 10)
    check_range(body, "priority", 0, 2)
    check_range(body, "reread_value", 0, 5)
    return body


MANGA_LIST = RestEndpointSpec(
    id="manga_list",
    method="GET",
    build_path=lambda p: "/manga",
    build_query=lambda p: paged_query(
        "manga_list", p, {"q": require_query(p), "nsfw": p.get("nsfw")}
    ),
    paged=True,
)

MANGA_DETAILS = RestEndpointSpec(
    id="manga_details",
    method="GET",
    build_path=lambda p: f"/manga/{require_id(p, 'manga_id')}",
    build_query=fields_query,
)

MANGA_RANKING = RestEndpointSpec(
    id="manga_ranking",
    method="GET",
    build_path=lambda p: "/manga/ranking",
    build_query=lambda p: paged_query(
        "manga_ranking",
        p,
        {"ranking_type": p.get("ranking_type") or MangaRankingType.ALL},
    ),
    paged=True,
)

UPDATE_MANGA_LIST_STATUS = RestEndpointSpec(
    id="update_manga_list_status",
    method="PATCH",
    build_path=lambda p: f"/manga/{require_id(p, 'manga_id')}/my_list_status",
    build_body=build_list_status_body,
    requires_user=True,
)

DELETE_MANGA_LIST_STATUS = RestEndpointSpec(
    id="delete_manga_list_status",
    method="DELETE",
    build_path=lambda p: f"/manga/{require_id(p, 'manga_id')}/my_list_status",
    requires_user=True,
)

USER_MANGA_LIST = RestEndpointSpec(
    id="user_manga_list",
    method="GET",
    build_path=lambda p: user_path(p, "mangalist"),
    build_query=lambda p: paged_query(
        "user_manga_list",
        p,
        {"status": p.get("status"), "sort": p.get("sort"), "nsfw": p.get("nsfw")},
    ),
    paged=True,
)


manga_nodes = NodeListAdapter(Manga)
ranked_manga = ListAdapter(Ranked[Manga])
detailed_manga = ModelAdapter(DetailedManga)
manga_list_status = ModelAdapter(MangaListStatus)
manga_list_entries = ListAdapter(MangaListEntry)
deleted = EmptyAdapter()
