"""Toggle community membership use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.domain.service import MembershipService
from campus.domain.value import CommunityId, UserId


class ToggleMembershipRequest(BaseModel):
    """Toggle membership request."""

    community_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleMembershipResponse(BaseModel):
    """Toggle membership response."""

    community_id: str
    active: bool  # Whether the user is now a member
    member_count: int


class ToggleMembershipUseCase(BaseUseCase):
    """Use case for joining or leaving a community."""

    def __init__(self, membership_service: MembershipService) -> None:
        """Initialize toggle membership use case.

        Args:
            membership_service: Membership domain service
        """
        self.membership_service = membership_service

    async def execute(
        self, request: ToggleMembershipRequest
    ) -> ToggleMembershipResponse:
        """Execute toggle membership flow.

        Raises:
            NotFoundError: If the community does not exist
            BusinessRuleViolationError: If the user is banned or is the creator
        """
        result = await self.membership_service.toggle_membership(
            CommunityId(UUID(request.community_id)), UserId(UUID(request.user_id))
        )
        return ToggleMembershipResponse(
            community_id=request.community_id,
            active=result.active,
            member_count=result.count,
        )
