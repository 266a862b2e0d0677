"""Like domain service.

Authoritative like toggles for posts and comments. Each toggle removes
an existing like or records a new one, then recounts and stores the
counter on the liked item.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from campus.domain.error import NotFoundError
from campus.domain.model.like import Like
from campus.domain.model.toggle import ToggleResult
from campus.domain.repository import LikeRepository
from campus.domain.value import CommentId, LikeId, LikeTargetType, PostId, UserId

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.like_repository = like_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def toggle_post_like(self, post_id: PostId, user_id: UserId) -> ToggleResult:
        """Like or unlike a post.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Whether the user now likes the post, and the post's like count

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "like_service.toggle_post_like", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            result = await self._toggle(LikeTargetType.POST, post_id, user_id)
            await self.post_service.set_likes_count(post_id, result.count)
            return result

    async def toggle_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> ToggleResult:
        """Like or unlike a comment.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            Whether the user now likes the comment, and its like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "like_service.toggle_comment_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment or comment.deleted_at is not None:
                raise NotFoundError("Comment", str(comment_id))

            result = await self._toggle(LikeTargetType.COMMENT, comment_id, user_id)
            await self.comment_service.set_likes_count(comment_id, result.count)
            return result

    async def _toggle(
        self, target_type: LikeTargetType, target_id: UUID, user_id: UserId
    ) -> ToggleResult:
        removed = await self.like_repository.delete_by_user_and_target(
            user_id=user_id, target_type=target_type, target_id=target_id
        )

        if removed:
            active = False
        else:
            like = Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                target_type=target_type,
                target_id=UUID(str(target_id)),
                created_at=datetime.now(),
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                # A concurrent request from the same user got there first
                logfire.warn(
                    "Duplicate like insert",
                    user_id=str(user_id),
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
            active = True

        count = await self.like_repository.count_by_target(target_type, target_id)
        logfire.info(
            "Like toggled",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
            active=active,
            count=count,
        )
        return ToggleResult(active=active, count=count)

    async def get_like_status(
        self, post_id: PostId, user_id: UserId | None = None
    ) -> ToggleResult:
        """Get a post's like count and whether `user_id` likes it.

        Args:
            post_id: Post ID
            user_id: Viewing user (None when signed out)

        Returns:
            Like state for the post
        """
        statuses = await self.get_like_statuses([post_id], user_id)
        return statuses[post_id]

    async def get_like_statuses(
        self, post_ids: Sequence[PostId], user_id: UserId | None = None
    ) -> dict[PostId, ToggleResult]:
        """Get like state for several posts at once (feed rendering).

        Every requested post is present in the result; posts without likes
        map to an inactive state with a zero count.

        Args:
            post_ids: Post IDs
            user_id: Viewing user (None when signed out)

        Returns:
            Mapping of post ID to like state
        """
        if not post_ids:
            return {}

        with logfire.span("like_service.get_like_statuses", count=len(post_ids)):
            likes = await self.like_repository.find_by_targets(
                LikeTargetType.POST, post_ids
            )

            counts: dict[UUID, int] = {}
            liked: set[UUID] = set()
            for like in likes:
                counts[like.target_id] = counts.get(like.target_id, 0) + 1
                if user_id is not None and like.user_id == user_id:
                    liked.add(like.target_id)

            return {
                post_id: ToggleResult(
                    active=UUID(str(post_id)) in liked,
                    count=counts.get(UUID(str(post_id)), 0),
                )
                for post_id in post_ids
            }

    async def get_user_likes_for_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, bool]:
        """Check which comments a user has liked.

        Args:
            user_id: User ID
            comment_ids: Comment IDs to check

        Returns:
            Mapping of comment ID to whether the user likes it
        """
        if not comment_ids:
            return {}

        likes = await self.like_repository.find_by_targets(
            LikeTargetType.COMMENT, comment_ids
        )
        liked = {like.target_id for like in likes if like.user_id == user_id}
        return {cid: UUID(str(cid)) in liked for cid in comment_ids}
