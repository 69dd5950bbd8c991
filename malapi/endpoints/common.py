"""Helpers shared by the endpoint definitions.

Request side: parameter cleaning and ``limit``/``offset`` checks.
Response side: adapters for the payload shapes the API uses.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter

from ..config import MAX_LIMITS
from ..core.exceptions import ValidationError
from ..core.selector import fields_param
from ..models.common import Holder
from ..runtime.runner import ResponseAdapter

M = TypeVar("M", bound=BaseModel)


def wire_value(value: Any) -> Any:
    """Convert a Python value to its query/form representation."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(wire_value(v)) for v in value)
    return value


def compact(params: Mapping[str, Any]) -> dict[str, Any]:
    """Drop None values and convert the rest with ``wire_value``."""
    return {k: wire_value(v) for k, v in params.items() if v is not None}


def check_paging(endpoint_id: str, params: Mapping[str, Any]) -> None:
    """Validate ``limit`` and ``offset`` against the endpoint's maximum.

    Raises:
        ValidationError: If limit is outside 1..max or offset is negative
    """
    limit = params.get("limit")
    if limit is not None:
        max_limit = MAX_LIMITS[endpoint_id]
        if not 1 <= limit <= max_limit:
            raise ValidationError(f"limit must be between 1 and {max_limit}, got {limit}")
    offset = params.get("offset")
    if offset is not None and offset < 0:
        raise ValidationError(f"offset must be >= 0, got {offset}")


def paged_query(
    endpoint_id: str,
    params: Mapping[str, Any],
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Query for a listing: extra keys plus limit, offset and fields."""
    check_paging(endpoint_id, params)
    return compact(
        {
            **(extra or {}),
            "limit": params.get("limit"),
            "offset": params.get("offset"),
            "fields": fields_param(params.get("fields")),
        }
    )


def fields_query(params: Mapping[str, Any]) -> dict[str, Any]:
    """Query holding only the ``fields`` selector, if any."""
    return compact({"fields": fields_param(params.get("fields"))})


def require_id(params: Mapping[str, Any], key: str) -> int:
    value = params[key]
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{key} must be a positive integer, got {value!r}")
    return value


def require_query(params: Mapping[str, Any]) -> str:
    q = params.get("q")
    if not q or not str(q).strip():
        raise ValidationError("q must be a non-empty search string")
    return str(q)


def check_range(body: Mapping[str, Any], key: str, low: int, high: int) -> None:
    value = body.get(key)
    if value is not None and not low <= value <= high:
        raise ValidationError(f"{key} must be between {low} and {high}, got {value}")


def user_path(params: Mapping[str, Any], suffix: str) -> str:
    """``/users/{name}/{suffix}``; the name defaults to ``@me``."""
    name = params.get("user_name") or "@me"
    return f"/users/{quote(name, safe='@')}/{suffix}"


class ModelAdapter(ResponseAdapter, Generic[M]):
    """Validate the whole body (or the paged ``data``) as one model."""

    def __init__(self, model: type[M]) -> None:
        self.model = model

    def parse(self, response: Any, params: dict[str, Any]) -> M:
        return self.model.model_validate(response)

    def map(self, data: Any) -> M:
        return self.model.model_validate(data)


class NodeListAdapter(ResponseAdapter, Generic[M]):
    """Unwrap ``[{"node": X}, ...]`` into ``[X, ...]``."""

    def __init__(self, model: type[M]) -> None:
        self.model = model
        self._type = TypeAdapter(list[Holder[model]])  # type: ignore[valid-type]

    def map(self, data: Any) -> list[M]:
        return [holder.node for holder in self._type.validate_python(data)]


class ListAdapter(ResponseAdapter, Generic[M]):
    """Validate a list of envelopes as-is (ranking, user list entries)."""

    def __init__(self, model: type[M]) -> None:
        self.model = model
        self._type = TypeAdapter(list[model])  # type: ignore[valid-type]

    def parse(self, response: Any, params: dict[str, Any]) -> list[M]:
        return self._type.validate_python(response)

    def map(self, data: Any) -> list[M]:
        return self._type.validate_python(data)


class EmptyAdapter(ResponseAdapter):
    """For calls whose success body carries nothing (DELETE)."""

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
