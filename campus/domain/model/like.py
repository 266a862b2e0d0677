"""Like entity.

A like is the association between one user and one post or comment.
Each user can like an item at most once.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import LikeId, LikeTargetType, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per item (enforced by database unique constraint)
    - Polymorphic reference to the liked item (post or comment)
    """

    id: LikeId
    user_id: UserId
    target_type: LikeTargetType
    target_id: UUID  # PostId or CommentId (both are UUIDs)
    created_at: datetime = Field(default_factory=datetime.now)
