"""Domain services."""

from .base import Service
from .comment_service import CommentService, comment_to_record
from .comment_tree import build_tree, count_nodes, timestamp_of
from .jwt_service import JWTService
from .like_service import LikeService
from .membership_service import MembershipService
from .post_service import PostService
from .toggle_coordinator import RemoteToggleClient, ToggleCoordinator, ToggleObserver

__all__ = [
    "CommentService",
    "JWTService",
    "LikeService",
    "MembershipService",
    "PostService",
    "RemoteToggleClient",
    "Service",
    "ToggleCoordinator",
    "ToggleObserver",
    "build_tree",
    "comment_to_record",
    "count_nodes",
    "timestamp_of",
]
