"""In-memory community repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from campus.domain.model import Community, Membership
from campus.domain.repository import CommunityRepository
from campus.domain.value import CommunityId, UserId


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._communities: dict[CommunityId, Community] = {}
        self._memberships: dict[tuple[CommunityId, UserId], Membership] = {}

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        return self._communities.get(community_id)

    async def save(self, community: Community) -> Community:
        self._communities[community.id] = community
        return community

    async def find_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> Optional[Membership]:
        return self._memberships.get((community_id, user_id))

    async def add_membership(self, membership: Membership) -> Membership:
        """Add a membership.

        Raises:
            IntegrityError: If the user already has a membership row
        """
        key = (membership.community_id, membership.user_id)
        if key in self._memberships:
            raise IntegrityError("Duplicate membership", None, Exception())
        self._memberships[key] = membership
        return membership

    async def remove_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        return self._memberships.pop((community_id, user_id), None) is not None

    async def count_members(self, community_id: CommunityId) -> int:
        return sum(
            1
            for (cid, _), membership in self._memberships.items()
            if cid == community_id and not membership.banned
        )

    async def set_member_count(self, community_id: CommunityId, count: int) -> None:
        community = self._communities.get(community_id)
        if community:
            self._communities[community_id] = community.model_copy(
                update={"member_count": max(0, count)}
            )
