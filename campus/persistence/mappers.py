"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from campus.domain.model import Comment, Community, Like, Membership, Post
from campus.domain.value import (
    UNKNOWN_AUTHOR,
    CommentId,
    CommunityId,
    CommunityName,
    LikeId,
    LikeTargetType,
    MemberRole,
    MembershipId,
    PostId,
    UserId,
)
from campus.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _handle(value: Any) -> Handle:
    # Profiles can be missing for users who never finished onboarding
    return Handle(value if value and str(value).strip() else UNKNOWN_AUTHOR)


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=_handle(row.get("author_handle")),
        content=row["content"],
        community_id=CommunityId(_uuid(row["community_id"]))
        if row.get("community_id")
        else None,
        image_url=row.get("image_url"),
        likes_count=row.get("likes_count", 0),
        comment_count=row.get("comment_count", 0),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=_handle(row.get("author_handle")),
        text=row["text"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row.get("depth", 0),
        likes_count=row.get("likes_count", 0),
        reactions=row.get("reactions") or {},
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=LikeTargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    data = like.model_dump()
    data["target_type"] = like.target_type.value
    return data


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(_uuid(row["id"])),
        name=CommunityName(row["name"]),
        description=row.get("description") or "",
        category=row.get("category"),
        is_private=row.get("is_private", False),
        created_by=UserId(_uuid(row["created_by"])),
        member_count=row.get("member_count", 0),
        created_at=row["created_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    return community.model_dump()


def row_to_membership(row: Dict[str, Any]) -> Membership:
    """Convert database row to Membership domain model."""
    return Membership(
        id=MembershipId(_uuid(row["id"])),
        community_id=CommunityId(_uuid(row["community_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=MemberRole(row.get("role") or MemberRole.MEMBER.value),
        banned=row.get("banned", False),
        joined_at=row["joined_at"],
    )


def membership_to_dict(membership: Membership) -> Dict[str, Any]:
    """Convert Membership domain model to database dict."""
    data = membership.model_dump()
    data["role"] = membership.role.value
    return data
