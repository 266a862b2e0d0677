"""In-memory like repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from campus.domain.model import Like
from campus.domain.repository import LikeRepository
from campus.domain.value import LikeTargetType, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    def _find(
        self, user_id: UserId, target_type: LikeTargetType, target_id: UUID
    ) -> Optional[Like]:
        target_uuid = UUID(str(target_id))
        for like in self._likes:
            if (
                like.user_id == user_id
                and like.target_type == target_type
                and like.target_id == target_uuid
            ):
                return like
        return None

    async def find_by_targets(
        self,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> list[Like]:
        """Find all likes on several items (batch query)."""
        if not target_ids:
            return []

        target_uuids = {UUID(str(tid)) for tid in target_ids}
        return [
            like
            for like in self._likes
            if like.target_type == target_type and like.target_id in target_uuids
        ]

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already likes the item
        """
        existing = self._find(
            like.user_id, like.target_type, like.target_id
        )
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> bool:
        """Delete a like by user and item."""
        existing = self._find(user_id, target_type, target_id)
        if existing is None:
            return False
        self._likes.remove(existing)
        return True

    async def count_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        return len(await self.find_by_targets(target_type, [target_id]))
