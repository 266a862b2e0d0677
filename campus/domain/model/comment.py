"""Comment entity.

Comments are stored flat with a `parent_id` reference; the threaded view
is rebuilt in memory by the comment tree builder.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import CommentId, PostId, UserId
from campus.domain.value.types import Handle


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)

    `reactions` is an opaque JSON mapping (emoji -> user ids, etc.) that the
    backend never interprets.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_handle: Handle
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    likes_count: int = Field(default=0, ge=0)
    reactions: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
