"""Favorite repository interface."""

from abc import ABC, abstractmethod

from qeta.domain.value import QuestionId, ViewerId


class FavoriteRepository(ABC):
    """Repository for Favorite markers."""

    @abstractmethod
    async def add(self, viewer: ViewerId, question_id: QuestionId) -> bool:
        """Favorite a question. Idempotent.

        Returns:
            True if a new marker was stored, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(self, viewer: ViewerId, question_id: QuestionId) -> bool:
        """Unfavorite a question. Idempotent.

        Returns:
            True if a marker was removed, False if there was none
        """
        pass
