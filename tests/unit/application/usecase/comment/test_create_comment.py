"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from campus.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from campus.domain.error import NotFoundError
from campus.domain.repository import CommentRepository, PostRepository
from campus.domain.value.types import Handle
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_comment_and_bumps_count(self, unit_env):
        """Commenting should store the comment and count it on the post."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())

        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                text="See you there",
                author_id=str(uuid4()),
                author_handle=Handle(root="ada"),
            )
        )

        assert response.depth == 0
        assert response.parent_id is None
        assert (await post_repo.find_by_id(post.id)).comment_count == 1
        assert len(await comment_repo.find_by_post(post.id)) == 1

    @pytest.mark.asyncio
    async def test_reply_to_existing_comment(self, unit_env):
        """A reply should reference its parent."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        parent = await comment_repo.save(make_comment(post.id))

        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                text="Same",
                author_id=str(uuid4()),
                author_handle=Handle(root="ada"),
                parent_id=str(parent.id),
            )
        )

        assert response.parent_id == str(parent.id)
        assert response.depth == 1

    @pytest.mark.asyncio
    async def test_unknown_post_raises(self, unit_env):
        """Commenting on a missing post should raise NotFoundError."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()),
                    text="Hello?",
                    author_id=str(uuid4()),
                    author_handle=Handle(root="ada"),
                )
            )
