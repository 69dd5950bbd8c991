"""Forum endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from ..core.exceptions import ValidationError
from ..models import DetailedForumTopic, ForumCategory, ForumTopic
from ..runtime.runner import ResponseAdapter, RestEndpointSpec
from .common import ListAdapter, ModelAdapter, paged_query, require_id


def _topics_query(params: dict[str, Any]) -> dict[str, Any]:
    filters = {
        "board_id": params.get("board_id"),
        "subboard_id": params.get("subboard_id"),
        "q": params.get("q"),
        "topic_user_name": params.get("topic_user_name"),
        "user_name": params.get("user_name"),
    }
    if all(value is None for value in filters.values()):
        raise ValidationError(
            "At least one of board_id, subboard_id, q, topic_user_name or user_name is required"
        )
    return paged_query("forum_topics", params, {**filters, "sort": params.get("sort")})


FORUM_BOARDS = RestEndpointSpec(
    id="forum_boards",
    method="GET",
    build_path=lambda p: "/forum/boards",
)

FORUM_TOPIC = RestEndpointSpec(
    id="forum_topic",
    method="GET",
    build_path=lambda p: f"/forum/topic/{require_id(p, 'topic_id')}",
    build_query=lambda p: paged_query("forum_topic", p),
    paged=True,
)

FORUM_TOPICS = RestEndpointSpec(
    id="forum_topics",
    method="GET",
    build_path=lambda p: "/forum/topics",
    build_query=_topics_query,
    paged=True,
)


class CategoriesAdapter(ResponseAdapter):
    """``{"categories": [...]}`` body of ``/forum/boards``."""

    _type = TypeAdapter(list[ForumCategory])

    def parse(self, response: Any, params: dict[str, Any]) -> list[ForumCategory]:
        categories = response.get("categories", []) if isinstance(response, dict) else response
        return self._type.validate_python(categories)


forum_categories = CategoriesAdapter()
# data is a single topic object even though the endpoint is paged
forum_topic = ModelAdapter(DetailedForumTopic)
forum_topics = ListAdapter(ForumTopic)
