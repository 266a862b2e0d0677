"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from campus.domain.model.comment import Comment
from campus.domain.model.thread import CommentRecord, ThreadedCommentNode
from campus.domain.repository import CommentRepository
from campus.domain.value import CommentId, OrphanPolicy, PostId, UserId
from campus.domain.value.types import Handle

from .base import Service
from .comment_tree import build_tree, count_nodes


def comment_to_record(comment: Comment) -> CommentRecord:
    """Wrap a comment for threading; the entity rides along as payload."""
    return CommentRecord(
        id=str(comment.id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        created_at=comment.created_at,
        payload=comment,
    )


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        author_handle: Handle,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment, or a reply when `parent_id` is set.

        Raises:
            ValueError: If the parent is missing, deleted, or on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            depth = await self._reply_depth(post_id, parent_id)
            now = datetime.now()
            saved = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    post_id=post_id,
                    author_id=author_id,
                    author_handle=author_handle,
                    text=text,
                    parent_id=parent_id,
                    depth=depth,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id), depth=depth
            )
            return saved

    async def _reply_depth(self, post_id: PostId, parent_id: CommentId | None) -> int:
        if parent_id is None:
            return 0

        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None or parent.deleted_at is not None:
            logfire.warn("Reply to missing comment", parent_id=str(parent_id))
            raise ValueError("Parent comment not found")
        if parent.post_id != post_id:
            logfire.warn(
                "Reply across posts",
                parent_id=str(parent_id),
                parent_post_id=str(parent.post_id),
                post_id=str(post_id),
            )
            raise ValueError("Parent comment does not belong to this post")
        return parent.depth + 1

    async def get_comments_for_post(
        self, post_id: PostId, limit: int | None = None
    ) -> list[Comment]:
        """Get a post's comments as a flat list, oldest first.

        Args:
            post_id: Post ID
            limit: Maximum number of comments (None for all)

        Returns:
            Non-deleted comments ordered by creation time
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id), limit=limit
        ):
            comments = await self.comment_repository.find_by_post(
                post_id=post_id, include_deleted=False, limit=limit
            )
            logfire.info(
                "Comments retrieved for post", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_comment_thread(
        self,
        post_id: PostId,
        orphan_policy: OrphanPolicy = OrphanPolicy.PROMOTE,
        limit: int | None = None,
    ) -> list[ThreadedCommentNode]:
        """Get a post's comments as a threaded forest.

        Each node's `record.payload` is the `Comment` entity.

        Args:
            post_id: Post ID
            orphan_policy: Handling of replies whose parent fell outside
                the fetched batch (e.g. cut off by `limit`)
            limit: Maximum number of comments fetched

        Returns:
            Top-level threads, newest first, replies oldest first
        """
        with logfire.span(
            "comment_service.get_comment_thread",
            post_id=str(post_id),
            orphan_policy=orphan_policy.value,
            limit=limit,
        ):
            comments = await self.get_comments_for_post(post_id, limit=limit)
            roots = build_tree(
                [comment_to_record(c) for c in comments], orphan_policy=orphan_policy
            )
            logfire.info(
                "Comment thread built",
                post_id=str(post_id),
                comment_count=len(comments),
                thread_count=len(roots),
                node_count=count_nodes(roots),
            )
            return roots

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def set_likes_count(self, comment_id: CommentId, count: int) -> None:
        """Store the authoritative like count on the comment."""
        await self.comment_repository.set_likes_count(comment_id, count)
