"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .community import InMemoryCommunityRepository
from .like import InMemoryLikeRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommunityRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
]
