"""Shapes shared by several endpoints."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class MALModel(BaseModel):
    """Base for all response models: immutable, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Picture(MALModel):
    medium: str | None = None
    large: str | None = None


class AlternativeTitles(MALModel):
    synonyms: list[str] = Field(default_factory=list)
    en: str | None = None
    ja: str | None = None


class Genre(MALModel):
    id: int
    name: str


class Holder(MALModel, Generic[T]):
    """``{"node": ...}`` envelope used by list responses."""

    node: T


class Ranking(MALModel):
    rank: int
    previous_rank: int | None = None


class Ranked(Holder[T], Generic[T]):
    """Ranking entry: the node plus its position."""

    ranking: Ranking


class Related(Holder[T], Generic[T]):
    relation_type: str
    relation_type_formatted: str


class Recommendation(Holder[T], Generic[T]):
    num_recommendations: int


class Paging(MALModel):
    """Cursor URLs of a paged response. Both are opaque."""

    previous: str | None = None
    next: str | None = None


class PagedResponse(MALModel):
    """Raw paged body.

    ``data`` is a list according to the API documentation, but the forum
    topic endpoint returns a single object, so it is left untyped here and
    shaped by the endpoint's map function.
    """

    data: Any
    # Absent and null both mean there are no cursors
    paging: Paging | None = None
