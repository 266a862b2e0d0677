"""Community membership domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from campus.domain.error import BusinessRuleViolationError, NotFoundError
from campus.domain.model.community import Community, Membership
from campus.domain.model.toggle import ToggleResult
from campus.domain.repository import CommunityRepository
from campus.domain.value import CommunityId, MemberRole, MembershipId, UserId

from .base import Service


class MembershipService(Service):
    """Domain service for joining and leaving communities."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        """Initialize membership service.

        Args:
            community_repository: Community repository
        """
        self.community_repository = community_repository

    async def get_community(self, community_id: CommunityId) -> Community:
        """Get a community by ID.

        Raises:
            NotFoundError: If the community does not exist
        """
        community = await self.community_repository.find_by_id(community_id)
        if not community:
            logfire.warn("Community not found", community_id=str(community_id))
            raise NotFoundError("Community", str(community_id))
        return community

    async def toggle_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> ToggleResult:
        """Join a community, or leave it if already a member.

        Business rules:
        - Banned users can neither rejoin nor leave (the ban row stays)
        - The creator cannot leave their own community

        Args:
            community_id: Community ID
            user_id: User ID

        Returns:
            Whether the user is now a member, and the member count

        Raises:
            NotFoundError: If the community does not exist
            BusinessRuleViolationError: If a business rule forbids the change
        """
        with logfire.span(
            "membership_service.toggle_membership",
            community_id=str(community_id),
            user_id=str(user_id),
        ):
            community = await self.get_community(community_id)
            membership = await self.community_repository.find_membership(
                community_id, user_id
            )

            if membership and membership.banned:
                logfire.warn(
                    "Banned user attempted membership change",
                    community_id=str(community_id),
                    user_id=str(user_id),
                )
                raise BusinessRuleViolationError("User is banned from this community")

            if membership:
                if community.created_by == user_id:
                    raise BusinessRuleViolationError(
                        "Community creator cannot leave the community"
                    )
                await self.community_repository.remove_membership(
                    community_id, user_id
                )
                active = False
            else:
                try:
                    await self.community_repository.add_membership(
                        Membership(
                            id=MembershipId(uuid4()),
                            community_id=community_id,
                            user_id=user_id,
                            role=MemberRole.MEMBER,
                            banned=False,
                            joined_at=datetime.now(),
                        )
                    )
                except IntegrityError:
                    # Already a member; joining twice is not an error
                    logfire.warn(
                        "Duplicate membership insert",
                        community_id=str(community_id),
                        user_id=str(user_id),
                    )
                active = True

            count = max(0, await self.community_repository.count_members(community_id))
            await self.community_repository.set_member_count(community_id, count)

            logfire.info(
                "Membership toggled",
                community_id=str(community_id),
                user_id=str(user_id),
                active=active,
                member_count=count,
            )
            return ToggleResult(active=active, count=count)
