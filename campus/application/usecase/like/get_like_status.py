"""Get like status use case."""

from uuid import UUID

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.domain.service import JWTService, LikeService
from campus.domain.value import PostId, UserId


class LikeStatusItem(BaseModel):
    """Like state of one post."""

    post_id: str
    active: bool
    count: int


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    post_ids: list[str]  # UUID strings
    auth_token: str | None = None  # JWT token (optional)


class GetLikeStatusResponse(BaseModel):
    """Get like status response, in request order."""

    statuses: list[LikeStatusItem]


class GetLikeStatusUseCase(BaseUseCase):
    """Use case for seeding like state for a feed of posts.

    Signed-out viewers get counts with `active` always False.
    """

    def __init__(self, like_service: LikeService, jwt_service: JWTService) -> None:
        self.like_service = like_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        post_ids = [PostId(UUID(pid)) for pid in dict.fromkeys(request.post_ids)]

        payload = self.jwt_service.get_payload_from_token(request.auth_token)
        user_id = UserId(UUID(payload.user_id)) if payload else None

        statuses = await self.like_service.get_like_statuses(post_ids, user_id)

        return GetLikeStatusResponse(
            statuses=[
                LikeStatusItem(
                    post_id=str(post_id),
                    active=statuses[post_id].active,
                    count=statuses[post_id].count,
                )
                for post_id in post_ids
            ]
        )
