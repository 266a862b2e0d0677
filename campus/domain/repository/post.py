"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from campus.domain.model.post import Post
from campus.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found (and not deleted), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def set_likes_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the denormalized like counter.

        Args:
            post_id: Post ID
            count: Authoritative like count
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the comment counter by 1.

        Args:
            post_id: Post ID
        """
        pass
