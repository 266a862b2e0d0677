"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.domain.error import NotFoundError
from campus.domain.service import CommentService, PostService
from campus.domain.value import CommentId, PostId, UserId
from campus.domain.value.types import Handle


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user
    author_handle: Handle  # Handle from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    text: str
    parent_id: str | None
    depth: int
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post does not exist
            ValueError: If the parent comment is invalid
        """
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(UUID(request.author_id)),
            author_handle=request.author_handle,
            text=request.text,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        await self.post_service.increment_comment_count(post_id)

        return CreateCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            created_at=comment.created_at,
        )
