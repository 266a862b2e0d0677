"""Unit tests for LikeService."""

from datetime import datetime
from uuid import uuid4

import pytest

from campus.domain.error import NotFoundError
from campus.domain.model import Like
from campus.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
)
from campus.domain.service import LikeService
from campus.domain.value import CommentId, LikeId, LikeTargetType, PostId, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTogglePostLike:
    """Tests for toggle_post_like method."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes(self, unit_env):
        """Toggling an unliked post should like it and update the counter."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        result = await like_service.toggle_post_like(post.id, user_id)

        assert result.active is True
        assert result.count == 1
        likes = await like_repo.find_by_targets(LikeTargetType.POST, [post.id])
        assert [like.user_id for like in likes] == [user_id]
        assert (await post_repo.find_by_id(post.id)).likes_count == 1

    @pytest.mark.asyncio
    async def test_second_toggle_unlikes(self, unit_env):
        """Toggling twice should return to not liked."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        await like_service.toggle_post_like(post.id, user_id)
        result = await like_service.toggle_post_like(post.id, user_id)

        assert result.active is False
        assert result.count == 0
        assert (await post_repo.find_by_id(post.id)).likes_count == 0

    @pytest.mark.asyncio
    async def test_count_includes_other_users(self, unit_env):
        """The returned count should be the authoritative total."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        for _ in range(3):
            await like_service.toggle_post_like(post.id, UserId(uuid4()))
        result = await like_service.toggle_post_like(post.id, UserId(uuid4()))

        assert result.active is True
        assert result.count == 4

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        """Liking an unknown post should raise NotFoundError."""
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_post_like(PostId(uuid4()), UserId(uuid4()))


class TestToggleCommentLike:
    """Tests for toggle_comment_like method."""

    @pytest.mark.asyncio
    async def test_like_comment_updates_counter(self, unit_env):
        """Liking a comment should update its counter."""
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4())))

        result = await like_service.toggle_comment_like(comment.id, UserId(uuid4()))

        assert result.active is True
        assert result.count == 1
        assert (await comment_repo.find_by_id(comment.id)).likes_count == 1

    @pytest.mark.asyncio
    async def test_deleted_comment_raises(self, unit_env):
        """Deleted comments cannot be liked."""
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), deleted_at=datetime.now())
        )

        with pytest.raises(NotFoundError):
            await like_service.toggle_comment_like(comment.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_post_and_comment_likes_are_separate(self, unit_env):
        """A comment like must not count toward a post with the same ID."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4())))

        await like_service.toggle_comment_like(comment.id, UserId(uuid4()))

        assert await like_repo.count_by_target(LikeTargetType.POST, comment.id) == 0


class TestLikeStatus:
    """Tests for like status lookups."""

    @pytest.mark.asyncio
    async def test_statuses_cover_every_requested_post(self, unit_env):
        """Posts without likes should map to inactive with zero count."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        liked = await post_repo.save(make_post())
        untouched = PostId(uuid4())
        viewer = UserId(uuid4())
        await like_service.toggle_post_like(liked.id, viewer)
        await like_service.toggle_post_like(liked.id, UserId(uuid4()))

        statuses = await like_service.get_like_statuses([liked.id, untouched], viewer)

        assert statuses[liked.id].active is True
        assert statuses[liked.id].count == 2
        assert statuses[untouched].active is False
        assert statuses[untouched].count == 0

    @pytest.mark.asyncio
    async def test_signed_out_viewer_never_active(self, unit_env):
        """Without a viewer only counts are reported."""
        like_service = await unit_env.get(LikeService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await like_service.toggle_post_like(post.id, UserId(uuid4()))

        status = await like_service.get_like_status(post.id)

        assert status.active is False
        assert status.count == 1

    @pytest.mark.asyncio
    async def test_user_likes_for_comments(self, unit_env):
        """Should report which comments the user likes."""
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        user_id = UserId(uuid4())
        liked = CommentId(uuid4())
        other = CommentId(uuid4())
        await like_repo.save(
            Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                target_type=LikeTargetType.COMMENT,
                target_id=liked,
                created_at=datetime.now(),
            )
        )

        result = await like_service.get_user_likes_for_comments(
            user_id, [liked, other]
        )

        assert result == {liked: True, other: False}

    @pytest.mark.asyncio
    async def test_empty_requests_short_circuit(self, unit_env):
        """Empty ID lists should give empty results."""
        like_service = await unit_env.get(LikeService)

        assert await like_service.get_like_statuses([]) == {}
        assert await like_service.get_user_likes_for_comments(UserId(uuid4()), []) == {}
