"""Get comment thread use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from campus.application.usecase.base import BaseUseCase
from campus.config import CommentSettings
from campus.domain.model import Comment, ThreadedCommentNode
from campus.domain.service import CommentService, JWTService, LikeService
from campus.domain.value import CommentId, OrphanPolicy, PostId, UserId


class ThreadedCommentResponse(BaseModel):
    """Comment with its replies for API response.

    Nesting mirrors the domain tree down to the configured maximum depth.
    Below that, a comment's replies list every deeper descendant flat, in
    thread order; their `parent_id` still names the real parent.
    """

    comment_id: str
    post_id: str
    author_id: str
    author_handle: str
    text: str
    parent_id: str | None
    depth: int
    likes_count: int
    reactions: dict[str, Any]
    created_at: datetime
    has_liked: bool
    reply_count: int
    replies: list["ThreadedCommentResponse"]

    @classmethod
    def from_domain(
        cls,
        node: ThreadedCommentNode,
        liked: dict[str, bool],
        replies: list["ThreadedCommentResponse"] | None = None,
    ) -> "ThreadedCommentResponse":
        """Convert a single domain node, with already converted replies.

        Args:
            node: Threaded node whose payload is a Comment
            liked: Comment ID string to whether the viewer likes it
            replies: Converted replies (none when omitted)
        """
        comment: Comment = node.record.payload
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_handle=str(comment.author_handle),
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            likes_count=comment.likes_count,
            reactions=comment.reactions,
            created_at=comment.created_at,
            has_liked=liked.get(node.id, False),
            reply_count=node.reply_count,
            replies=replies or [],
        )

    @classmethod
    def from_thread(
        cls, root: ThreadedCommentNode, liked: dict[str, bool], max_depth: int
    ) -> "ThreadedCommentResponse":
        """Convert a whole thread without recursion.

        Args:
            root: Top-level node
            liked: Comment ID string to whether the viewer likes it
            max_depth: Deepest nesting level kept; 0 is the top-level comment
        """
        built: dict[str, ThreadedCommentResponse] = {}
        stack: list[tuple[ThreadedCommentNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, level, expanded = stack.pop()
            if level >= max_depth:
                flat = [cls.from_domain(d, liked) for d in _descendants(node)]
                built[node.id] = cls.from_domain(node, liked, flat)
            elif not expanded:
                stack.append((node, level, True))
                stack.extend((child, level + 1, False) for child in node.children)
            else:
                replies = [built.pop(child.id) for child in node.children]
                built[node.id] = cls.from_domain(node, liked, replies)
        return built[root.id]


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: str  # UUID string
    orphan_policy: OrphanPolicy | None = None  # None uses the configured default
    limit: int | None = None  # None uses the configured fetch limit
    auth_token: str | None = None  # JWT token (optional, enables has_liked)


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    post_id: str
    comments: list[ThreadedCommentResponse]
    total: int


def _descendants(node: ThreadedCommentNode) -> list[ThreadedCommentNode]:
    """Every node below `node`, depth first, oldest reply first."""
    nodes: list[ThreadedCommentNode] = []
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        nodes.append(current)
        stack.extend(reversed(current.children))
    return nodes


def _flatten(roots: list[ThreadedCommentNode]) -> list[ThreadedCommentNode]:
    nodes: list[ThreadedCommentNode] = []
    for root in roots:
        nodes.append(root)
        nodes.extend(_descendants(root))
    return nodes


class GetCommentThreadUseCase(BaseUseCase):
    """Use case for getting a post's comments as nested threads.

    Top-level comments come newest first and replies oldest first.
    """

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            like_service: Like service for the viewer's like state
            jwt_service: JWT service for decoding auth tokens
            comment_settings: Orphan policy, fetch limit and nesting depth
        """
        self.comment_service = comment_service
        self.like_service = like_service
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: GetCommentThreadRequest
    ) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Steps:
        1. Fetch up to `limit` comments and thread them
        2. Look up which comments the viewer likes (if authenticated)
        3. Convert the forest to response models

        Args:
            request: Post ID, optional orphan policy, limit and auth token

        Returns:
            Threaded comments with the number of comments included
        """
        post_id = PostId(UUID(request.post_id))
        orphan_policy = (
            request.orphan_policy or self.comment_settings.default_orphan_policy
        )
        limit = request.limit or self.comment_settings.fetch_limit
        max_depth = self.comment_settings.max_reply_depth

        roots = await self.comment_service.get_comment_thread(
            post_id=post_id, orphan_policy=orphan_policy, limit=limit
        )
        nodes = _flatten(roots)

        liked: dict[str, bool] = {}
        payload = self.jwt_service.get_payload_from_token(request.auth_token)
        if payload and nodes:
            likes_map = await self.like_service.get_user_likes_for_comments(
                user_id=UserId(UUID(payload.user_id)),
                comment_ids=[CommentId(UUID(node.id)) for node in nodes],
            )
            liked = {str(cid): has_liked for cid, has_liked in likes_map.items()}

        return GetCommentThreadResponse(
            post_id=request.post_id,
            comments=[
                ThreadedCommentResponse.from_thread(r, liked, max_depth)
                for r in roots
            ],
            total=len(nodes),
        )
