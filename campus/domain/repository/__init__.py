"""Repository interfaces for the campus domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from campus.domain.repository.comment import CommentRepository
from campus.domain.repository.community import CommunityRepository
from campus.domain.repository.like import LikeRepository
from campus.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
    "CommunityRepository",
]
