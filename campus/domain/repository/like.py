"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence
from uuid import UUID

from campus.domain.model.like import Like
from campus.domain.value import LikeTargetType, UserId


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def find_by_targets(
        self,
        target_type: LikeTargetType,
        target_ids: Sequence[UUID],
    ) -> List[Like]:
        """Find all likes on several items (batch query).

        Args:
            target_type: Type of items
            target_ids: Item IDs

        Returns:
            Likes on any of the items
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes this item
        """
        pass

    @abstractmethod
    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> bool:
        """Delete a like by user and item.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_target(
        self,
        target_type: LikeTargetType,
        target_id: UUID,
    ) -> int:
        """Count likes on a specific item."""
        pass
