"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.domain.service import LikeService
from campus.domain.value import CommentId, LikeTargetType, PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    target_type: LikeTargetType
    target_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response with the authoritative state."""

    target_type: LikeTargetType
    target_id: str
    active: bool
    count: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the post or comment does not exist
        """
        user_id = UserId(UUID(request.user_id))

        if request.target_type == LikeTargetType.POST:
            result = await self.like_service.toggle_post_like(
                PostId(UUID(request.target_id)), user_id
            )
        else:  # LikeTargetType.COMMENT
            result = await self.like_service.toggle_comment_like(
                CommentId(UUID(request.target_id)), user_id
            )

        return ToggleLikeResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            active=result.active,
            count=result.count,
        )
