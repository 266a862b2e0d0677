"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Post
from campus.domain.repository import PostRepository
from campus.domain.value import PostId
from campus.persistence.mappers import post_to_dict, row_to_post
from campus.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a non-deleted post by ID."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        exists = await self.session.execute(
            select(posts_table.c.id).where(posts_table.c.id == post.id)
        )
        if exists.fetchone():
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def set_likes_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the like counter."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(likes_count=max(0, count), updated_at=datetime.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the comment counter by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
