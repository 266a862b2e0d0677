"""Community routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from campus.application.usecase.community import (
    ToggleMembershipRequest,
    ToggleMembershipResponse,
    ToggleMembershipUseCase,
)
from campus.domain.error import DomainError
from campus.domain.service import JWTService
from campus.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/communities", tags=["communities"], route_class=DishkaRoute)


@router.post("/{community_id}/membership", response_model=ToggleMembershipResponse)
async def toggle_membership(
    community_id: str,
    toggle_membership_use_case: FromDishka[ToggleMembershipUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleMembershipResponse:
    """Join a community, or leave it if already a member.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the community does
            not exist, 409 if the user is banned or is the creator
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise unauthenticated("join communities")

    try:
        request = ToggleMembershipRequest(community_id=community_id, user_id=user_id)
        return await toggle_membership_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
