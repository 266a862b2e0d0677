"""In-memory comment repository for testing."""

from typing import Optional

from campus.domain.model import Comment
from campus.domain.repository import CommentRepository
from campus.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
        limit: Optional[int] = None,
    ) -> list[Comment]:
        """Find comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        if not include_deleted:
            comments = [c for c in comments if c.deleted_at is None]

        comments.sort(key=lambda c: (c.created_at, str(c.id)))

        if limit is not None:
            comments = comments[:limit]
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def set_likes_count(self, comment_id: CommentId, count: int) -> None:
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"likes_count": max(0, count)}
            )
