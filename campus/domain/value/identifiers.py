"""Strongly typed identifiers for campus domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
CommunityId = NewType("CommunityId", UUID)
MembershipId = NewType("MembershipId", UUID)
