"""PostgreSQL repository implementations."""

from campus.persistence.repository.comment import PostgresCommentRepository
from campus.persistence.repository.community import PostgresCommunityRepository
from campus.persistence.repository.like import PostgresLikeRepository
from campus.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresCommunityRepository",
]
