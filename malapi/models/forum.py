"""Forum models."""

from __future__ import annotations

from pydantic import Field

from .common import MALModel


class ForumSubboard(MALModel):
    id: int
    title: str


class ForumBoard(MALModel):
    id: int
    title: str
    description: str = ""
    subboards: list[ForumSubboard] = Field(default_factory=list)


class ForumCategory(MALModel):
    """Top-level group of boards from ``/forum/boards``."""

    title: str
    boards: list[ForumBoard] = Field(default_factory=list)


class ForumTopicAuthor(MALModel):
    id: int
    name: str


class ForumTopic(MALModel):
    id: int
    title: str
    created_at: str
    created_by: ForumTopicAuthor
    number_of_posts: int
    last_post_created_at: str
    last_post_created_by: ForumTopicAuthor
    is_locked: bool


class ForumPostAuthor(MALModel):
    id: int
    name: str
    forum_avator: str | None = None


class ForumPost(MALModel):
    id: int
    number: int
    created_at: str
    created_by: ForumPostAuthor
    body: str
    signature: str = ""


class ForumTopicPollOption(MALModel):
    id: int
    text: str
    votes: int


class ForumTopicPoll(MALModel):
    id: int
    question: str
    close: bool
    options: list[ForumTopicPollOption] = Field(default_factory=list)


class DetailedForumTopic(MALModel):
    """Body of ``/forum/topic/{id}``.

    The endpoint is paged over posts, yet ``data`` is this single object
    rather than a list.
    """

    title: str
    posts: list[ForumPost] = Field(default_factory=list)
    poll: ForumTopicPoll | list[ForumTopicPoll] | None = None
