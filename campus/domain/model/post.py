"""Post entity.

Posts are the feed items of the campus network. A post may belong to a
community; likes and comments hang off it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import CommunityId, PostId, UserId
from campus.domain.value.types import Handle


class Post(DomainModel):
    """Post entity.

    `likes_count` and `comment_count` are denormalized counters kept in
    step with the likes and comments tables by the domain services.
    """

    id: PostId
    author_id: UserId
    author_handle: Handle
    content: str = Field(min_length=1, max_length=5000)
    community_id: Optional[CommunityId] = None
    image_url: Optional[str] = None
    likes_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
