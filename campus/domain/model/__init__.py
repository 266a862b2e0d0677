"""Domain model entities for campus."""

from campus.domain.model.comment import Comment
from campus.domain.model.community import Community, Membership
from campus.domain.model.like import Like
from campus.domain.model.post import Post
from campus.domain.model.thread import CommentRecord, ThreadedCommentNode
from campus.domain.model.toggle import (
    Applied,
    Failed,
    IdleState,
    PendingState,
    Rejected,
    ToggleOutcome,
    ToggleResult,
    ToggleState,
)

__all__ = [
    "Post",
    "Comment",
    "Like",
    "Community",
    "Membership",
    "CommentRecord",
    "ThreadedCommentNode",
    "ToggleResult",
    "ToggleState",
    "IdleState",
    "PendingState",
    "ToggleOutcome",
    "Applied",
    "Rejected",
    "Failed",
]
