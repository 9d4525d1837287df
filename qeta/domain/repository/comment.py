"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from qeta.domain.model.comment import Comment
from qeta.domain.value import CommentId, TargetType, ViewerId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def create(
        self,
        target_type: TargetType,
        target_id: int,
        author: ViewerId,
        content: str,
        created: datetime,
    ) -> Optional[Comment]:
        """Attach a comment to a question or answer.

        Returns:
            The created comment, or None if the target doesn't exist
        """
        pass

    @abstractmethod
    async def delete(
        self,
        comment_id: CommentId,
        target_type: TargetType,
        target_id: int,
        author: Optional[ViewerId],
    ) -> bool:
        """Delete a comment that belongs to the given target.

        Args:
            comment_id: The comment ID
            target_type: Type of the owning entity
            target_id: ID of the owning entity
            author: Restrict deletion to this author, None for no restriction

        Returns:
            True if a comment was deleted
        """
        pass
