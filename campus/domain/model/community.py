"""Community and membership entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from campus.domain.model.common import DomainModel
from campus.domain.value import (
    CommunityId,
    CommunityName,
    MemberRole,
    MembershipId,
    UserId,
)


class Community(DomainModel):
    """Community entity.

    `member_count` starts at 1 because the creator joins on creation.
    """

    id: CommunityId
    name: CommunityName
    description: str = Field(default="", max_length=2000)
    category: Optional[str] = None
    is_private: bool = False
    created_by: UserId
    member_count: int = Field(default=1, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)


class Membership(DomainModel):
    """A user's membership in a community.

    Banned memberships are kept so the ban survives a leave/rejoin cycle.
    """

    id: MembershipId
    community_id: CommunityId
    user_id: UserId
    role: MemberRole = MemberRole.MEMBER
    banned: bool = False
    joined_at: datetime = Field(default_factory=datetime.now)
