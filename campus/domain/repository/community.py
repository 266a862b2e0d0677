"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from campus.domain.model.community import Community, Membership
from campus.domain.value import CommunityId, UserId


class CommunityRepository(ABC):
    """Repository for communities and their memberships."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Save a community (create or update)."""
        pass

    @abstractmethod
    async def find_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> Optional[Membership]:
        """Find a user's membership row, banned or not."""
        pass

    @abstractmethod
    async def add_membership(self, membership: Membership) -> Membership:
        """Insert a membership.

        Raises:
            IntegrityError: If the user is already a member
        """
        pass

    @abstractmethod
    async def remove_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Delete a membership.

        Returns:
            True if a membership was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_members(self, community_id: CommunityId) -> int:
        """Count non-banned members of a community."""
        pass

    @abstractmethod
    async def set_member_count(self, community_id: CommunityId, count: int) -> None:
        """Overwrite the denormalized member counter."""
        pass
