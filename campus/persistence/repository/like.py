"""PostgreSQL implementation of Like repository."""

from typing import List, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Like
from campus.domain.repository import LikeRepository
from campus.domain.value import LikeTargetType, UserId
from campus.persistence.mappers import like_to_dict, row_to_like
from campus.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_targets(
        self,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find all likes on several items (batch query)."""
        if not target_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Runs inside a savepoint so a unique violation leaves the outer
        transaction usable.
        """
        stmt = insert(likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> bool:
        """Delete a like by user and item."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.target_type == target_type.value)
            .where(likes_table.c.target_id == target_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
