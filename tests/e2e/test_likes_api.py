"""End-to-end tests for the like endpoints."""

from uuid import uuid4

import pytest

from campus.domain.repository import CommentRepository, PostRepository
from campus.domain.value import UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_api_fixture

api = create_api_fixture()


class TestToggleLike:
    """End-to-end tests for the like toggles."""

    @pytest.mark.asyncio
    async def test_requires_auth(self, api):
        """Anonymous likes should be refused."""
        response = await api.client.post(f"/posts/{uuid4()}/like")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token(self, api):
        """A forged token should be refused."""
        response = await api.client.post(
            f"/posts/{uuid4()}/like", headers={"Cookie": "auth_token=forged"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_like_and_unlike_post(self, api):
        """Two toggles should like then unlike."""
        post_repo = await api.container.get(PostRepository)
        post = await post_repo.save(make_post())
        headers = api.auth_headers(UserId(uuid4()))

        liked = await api.client.post(f"/posts/{post.id}/like", headers=headers)
        unliked = await api.client.post(f"/posts/{post.id}/like", headers=headers)

        assert liked.status_code == 200
        assert liked.json() == {
            "target_type": "post",
            "target_id": str(post.id),
            "active": True,
            "count": 1,
        }
        assert unliked.json()["active"] is False
        assert unliked.json()["count"] == 0

    @pytest.mark.asyncio
    async def test_like_comment(self, api):
        """Comment likes should update the comment counter."""
        comment_repo = await api.container.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_post().id))

        response = await api.client.post(
            f"/comments/{comment.id}/like", headers=api.auth_headers(UserId(uuid4()))
        )

        assert response.status_code == 200
        assert response.json()["target_type"] == "comment"
        assert (await comment_repo.find_by_id(comment.id)).likes_count == 1

    @pytest.mark.asyncio
    async def test_unknown_post(self, api):
        """Liking a missing post should be a 404."""
        response = await api.client.post(
            f"/posts/{uuid4()}/like", headers=api.auth_headers(UserId(uuid4()))
        )

        assert response.status_code == 404


class TestLikeStatuses:
    """End-to-end tests for GET /posts/likes."""

    @pytest.mark.asyncio
    async def test_batch_statuses(self, api):
        """Should report counts and the viewer's own likes."""
        post_repo = await api.container.get(PostRepository)
        liked = await post_repo.save(make_post())
        other = await post_repo.save(make_post())
        viewer = UserId(uuid4())
        headers = api.auth_headers(viewer)
        await api.client.post(f"/posts/{liked.id}/like", headers=headers)

        response = await api.client.get(
            "/posts/likes",
            params=[("ids", str(liked.id)), ("ids", str(other.id))],
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["statuses"] == [
            {"post_id": str(liked.id), "active": True, "count": 1},
            {"post_id": str(other.id), "active": False, "count": 0},
        ]

    @pytest.mark.asyncio
    async def test_no_ids(self, api):
        """No IDs should give no statuses."""
        response = await api.client.get("/posts/likes")

        assert response.status_code == 200
        assert response.json()["statuses"] == []
