"""SQLAlchemy table definitions for campus.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()


def _id() -> Column:
    return Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()")


def _timestamp(name: str, nullable: bool = False) -> Column:
    if nullable:
        return Column(name, TIMESTAMP(timezone=True), nullable=True)
    return Column(name, TIMESTAMP(timezone=True), nullable=False, server_default="NOW()")


# COMMUNITIES TABLE
communities_table = Table(
    "communities",
    metadata,
    _id(),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("category", String(50), nullable=True),
    Column("is_private", Boolean, nullable=False, server_default="false"),
    Column("created_by", UUID, nullable=False),  # auth.users id, external
    Column("member_count", Integer, nullable=False, server_default="1"),
    _timestamp("created_at"),
    CheckConstraint("member_count >= 0", name="member_count_non_negative"),
)

# COMMUNITY_MEMBERS TABLE
community_members_table = Table(
    "community_members",
    metadata,
    _id(),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "role",
        Enum("member", "moderator", "admin", name="member_role", create_type=False),
        nullable=False,
        server_default="member",
    ),
    Column("banned", Boolean, nullable=False, server_default="false"),
    _timestamp("joined_at"),
    UniqueConstraint("community_id", "user_id", name="uq_community_member"),
)

Index("idx_community_members_user_id", community_members_table.c.user_id)

# POSTS TABLE
posts_table = Table(
    "posts",
    metadata,
    _id(),
    Column("author_id", UUID, nullable=False),
    Column("author_handle", String(255), nullable=False),  # Denormalized profile
    Column("content", Text, nullable=False),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("image_url", Text, nullable=True),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    _timestamp("deleted_at", nullable=True),
    CheckConstraint("likes_count >= 0", name="post_likes_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_community_id", posts_table.c.community_id)

# COMMENTS TABLE
comments_table = Table(
    "comments",
    metadata,
    _id(),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("author_handle", String(255), nullable=False),  # Denormalized profile
    Column("text", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("reactions", JSONB, nullable=False, server_default="{}"),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    _timestamp("deleted_at", nullable=True),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# LIKES TABLE (posts and comments)
likes_table = Table(
    "likes",
    metadata,
    _id(),
    Column("user_id", UUID, nullable=False),
    Column(
        "target_type",
        Enum("post", "comment", name="like_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    _timestamp("created_at"),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_like"),
)

Index("idx_likes_target", likes_table.c.target_type, likes_table.c.target_id)
