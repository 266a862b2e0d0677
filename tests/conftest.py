"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from campus.domain.model import Comment, CommentRecord, Community, Post
from campus.domain.value import (
    CommentId,
    CommunityId,
    CommunityName,
    Handle,
    PostId,
    UserId,
)

BASE_TIME = datetime(2025, 3, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Timestamp `minutes` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def record(
    id: str, parent_id: str | None = None, minute: int | None = 0
) -> CommentRecord:
    """Helper for building tree-builder input."""
    return CommentRecord(
        id=id,
        parent_id=parent_id,
        created_at=at(minute) if minute is not None else None,
    )


def make_post(post_id: PostId | None = None, **overrides) -> Post:
    """Helper for creating a valid post."""
    fields = {
        "id": post_id or PostId(uuid4()),
        "author_id": UserId(uuid4()),
        "author_handle": Handle(root="ada"),
        "content": "Anyone up for the study group tonight?",
    }
    fields.update(overrides)
    return Post(**fields)


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    minute: int = 0,
    **overrides,
) -> Comment:
    """Helper for creating a valid comment, optionally as a reply."""
    fields = {
        "id": CommentId(uuid4()),
        "post_id": post_id,
        "author_id": UserId(uuid4()),
        "author_handle": Handle(root="grace"),
        "text": "Count me in",
        "parent_id": parent.id if parent else None,
        "depth": parent.depth + 1 if parent else 0,
        "created_at": at(minute),
        "updated_at": at(minute),
    }
    fields.update(overrides)
    return Comment(**fields)


def make_community(created_by: UserId | None = None, **overrides) -> Community:
    """Helper for creating a valid community."""
    fields = {
        "id": CommunityId(uuid4()),
        "name": CommunityName(root="Chess Club"),
        "created_by": created_by or UserId(uuid4()),
        "member_count": 1,
    }
    fields.update(overrides)
    return Community(**fields)
