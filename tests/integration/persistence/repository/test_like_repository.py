"""Integration tests for the PostgreSQL repositories.

Run against a migrated database:

    DATABASE__URL=postgresql+asyncpg://... pytest -m integration
"""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from campus.domain.model import Like
from campus.domain.repository import CommentRepository, LikeRepository, PostRepository
from campus.domain.service import LikeService
from campus.domain.value import LikeId, LikeTargetType, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


def make_like(user_id: UserId, target_id) -> Like:
    return Like(
        id=LikeId(uuid4()),
        user_id=user_id,
        target_type=LikeTargetType.POST,
        target_id=target_id,
        created_at=datetime.now(),
    )


class TestPostgresLikeRepository:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_like_raises_and_session_survives(self, integration_env):
        """A duplicate insert should raise without poisoning the session."""
        post_repo = await integration_env.get(PostRepository)
        like_repo = await integration_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        await like_repo.save(make_like(user_id, post.id))

        with pytest.raises(IntegrityError):
            await like_repo.save(make_like(user_id, post.id))

        assert await like_repo.count_by_target(LikeTargetType.POST, post.id) == 1

    @pytest.mark.asyncio
    async def test_toggle_round_trip(self, integration_env):
        """Like then unlike should leave no rows and a zero counter."""
        post_repo = await integration_env.get(PostRepository)
        like_service = await integration_env.get(LikeService)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        liked = await like_service.toggle_post_like(post.id, user_id)
        unliked = await like_service.toggle_post_like(post.id, user_id)

        assert (liked.active, liked.count) == (True, 1)
        assert (unliked.active, unliked.count) == (False, 0)
        assert (await post_repo.find_by_id(post.id)).likes_count == 0


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_by_post_oldest_first_with_limit(self, integration_env):
        """Comments should come back oldest first, capped by the limit."""
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        newest = make_comment(post.id, minute=9)
        oldest = make_comment(post.id, minute=1)
        middle = make_comment(post.id, minute=5)
        for comment in (newest, oldest, middle):
            await comment_repo.save(comment)

        found = await comment_repo.find_by_post(post.id, limit=2)

        assert [c.id for c in found] == [oldest.id, middle.id]
