"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from campus.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)
from campus.domain.error import DomainError
from campus.domain.service import JWTService
from campus.domain.value import OrphanPolicy
from campus.interface.error import to_http_exception, unauthenticated

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=GetCommentThreadResponse)
async def get_comment_thread(
    post_id: str,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
    orphans: OrphanPolicy | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=500),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentThreadResponse:
    """Get a post's comments as nested threads.

    Authentication is optional; signed-in viewers get `has_liked` flags.

    Args:
        post_id: Post UUID
        get_comment_thread_use_case: Use case from DI
        orphans: What to do with replies whose parent was not fetched
        limit: Maximum number of comments to fetch
        auth_token: JWT token from cookie (optional)
    """
    try:
        request = GetCommentThreadRequest(
            post_id=post_id,
            orphan_policy=orphans,
            limit=limit,
            auth_token=auth_token,
        )
        return await get_comment_thread_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, the post is missing, or the
            parent comment is invalid
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise unauthenticated("create comments")

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            text=request.text,
            author_id=payload.user_id,
            author_handle=payload.handle,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
