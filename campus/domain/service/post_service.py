"""Post domain service."""

import logfire

from campus.domain.model.post import Post
from campus.domain.repository import PostRepository
from campus.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment counter.

        Args:
            post_id: Post ID
        """
        with logfire.span(
            "post_service.increment_comment_count", post_id=str(post_id)
        ):
            await self.post_repository.increment_comment_count(post_id)
            logfire.info("Post comment count incremented", post_id=str(post_id))

    async def set_likes_count(self, post_id: PostId, count: int) -> None:
        """Store the authoritative like count on the post.

        Args:
            post_id: Post ID
            count: Like count
        """
        await self.post_repository.set_likes_count(post_id, count)
