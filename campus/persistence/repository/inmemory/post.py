"""In-memory post repository for testing."""

from typing import Optional

from campus.domain.model import Post
from campus.domain.repository import PostRepository
from campus.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        post = self._posts.get(post_id)
        if post is None or post.deleted_at is not None:
            return None
        return post

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def set_likes_count(self, post_id: PostId, count: int) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update={"likes_count": max(0, count)})

    async def increment_comment_count(self, post_id: PostId) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + 1}
            )
