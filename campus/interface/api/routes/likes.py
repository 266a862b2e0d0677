"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from campus.application.usecase.like import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from campus.domain.error import DomainError
from campus.domain.service import JWTService
from campus.domain.value import LikeTargetType
from campus.interface.error import to_http_exception, unauthenticated

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


async def _toggle(
    target_type: LikeTargetType,
    target_id: str,
    toggle_like_use_case: ToggleLikeUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> ToggleLikeResponse:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise unauthenticated("like")

    try:
        request = ToggleLikeRequest(
            target_type=target_type, target_id=target_id, user_id=user_id
        )
        return await toggle_like_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/posts/likes", response_model=GetLikeStatusResponse)
async def get_like_statuses(
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    ids: list[str] = Query(default=[]),
    auth_token: str | None = Cookie(default=None),
) -> GetLikeStatusResponse:
    """Get like counts for several posts, plus the viewer's own likes.

    Used to seed optimistic like state when a feed renders.

    Args:
        ids: Post UUIDs (repeat the parameter: ?ids=a&ids=b)
    """
    try:
        request = GetLikeStatusRequest(post_ids=ids, auth_token=auth_token)
        return await get_like_status_use_case.execute(request)
    except ValueError as e:
        raise to_http_exception(e)


@router.post("/posts/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_post_like(
    post_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a post, or unlike it if already liked.

    Requires authentication.

    Returns:
        Whether the viewer now likes the post, and its like count
    """
    return await _toggle(
        LikeTargetType.POST, post_id, toggle_like_use_case, jwt_service, auth_token
    )


@router.post("/comments/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_comment_like(
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a comment, or unlike it if already liked.

    Requires authentication.
    """
    return await _toggle(
        LikeTargetType.COMMENT,
        comment_id,
        toggle_like_use_case,
        jwt_service,
        auth_token,
    )
