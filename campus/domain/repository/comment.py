"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from campus.domain.model.comment import Comment
from campus.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Plays the comment source role for thread building: it supplies the
    flat list, the tree is built in memory.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
        limit: Optional[int] = None,
    ) -> List[Comment]:
        """Find comments for a post, oldest first.

        Args:
            post_id: The post ID
            include_deleted: Whether to include soft-deleted comments
            limit: Maximum number of comments to return (None for all)

        Returns:
            Flat list of comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def set_likes_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite the denormalized like counter.

        Args:
            comment_id: Comment ID
            count: Authoritative like count
        """
        pass
