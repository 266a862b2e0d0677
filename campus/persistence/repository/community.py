"""PostgreSQL implementation of Community repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus.domain.model import Community, Membership
from campus.domain.repository import CommunityRepository
from campus.domain.value import CommunityId, UserId
from campus.persistence.mappers import (
    community_to_dict,
    membership_to_dict,
    row_to_community,
    row_to_membership,
)
from campus.persistence.tables import communities_table, community_members_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community(row._asdict()) if row else None

    async def save(self, community: Community) -> Community:
        """Save a community (create or update)."""
        community_dict = community_to_dict(community)
        if await self.find_by_id(community.id):
            stmt = (
                communities_table.update()
                .where(communities_table.c.id == community.id)
                .values(**community_dict)
            )
        else:
            stmt = communities_table.insert().values(**community_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return community

    async def find_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> Optional[Membership]:
        """Find a user's membership row, banned or not."""
        stmt = select(community_members_table).where(
            and_(
                community_members_table.c.community_id == community_id,
                community_members_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_membership(row._asdict()) if row else None

    async def add_membership(self, membership: Membership) -> Membership:
        """Insert a membership inside a savepoint."""
        stmt = insert(community_members_table).values(
            **membership_to_dict(membership)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return membership

    async def remove_membership(
        self, community_id: CommunityId, user_id: UserId
    ) -> bool:
        """Delete a membership."""
        stmt = delete(community_members_table).where(
            and_(
                community_members_table.c.community_id == community_id,
                community_members_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_members(self, community_id: CommunityId) -> int:
        """Count non-banned members of a community."""
        stmt = (
            select(func.count())
            .select_from(community_members_table)
            .where(community_members_table.c.community_id == community_id)
            .where(community_members_table.c.banned.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def set_member_count(self, community_id: CommunityId, count: int) -> None:
        """Overwrite the member counter."""
        stmt = (
            communities_table.update()
            .where(communities_table.c.id == community_id)
            .values(member_count=max(0, count))
        )
        await self.session.execute(stmt)
        await self.session.flush()
