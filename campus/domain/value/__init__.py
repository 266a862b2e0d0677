"""Domain value objects for campus."""

from campus.domain.value.identifiers import (
    CommentId,
    CommunityId,
    LikeId,
    MembershipId,
    PostId,
    UserId,
)
from campus.domain.value.types import (
    UNKNOWN_AUTHOR,
    CommunityName,
    Handle,
    LikeTargetType,
    MemberRole,
    OrphanPolicy,
    RejectionReason,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "CommunityId",
    "MembershipId",
    # Types
    "UNKNOWN_AUTHOR",
    "CommunityName",
    "Handle",
    "LikeTargetType",
    "MemberRole",
    "OrphanPolicy",
    "RejectionReason",
]
