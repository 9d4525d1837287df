"""Favorite domain service."""

import logfire

from qeta.domain.repository import FavoriteRepository
from qeta.domain.value import QuestionId, ViewerId

from .question_service import QuestionService


class FavoriteService:
    """Domain service for favorite markers."""

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        question_service: QuestionService,
    ) -> None:
        self.favorite_repository = favorite_repository
        self.question_service = question_service

    async def set_favorite(
        self, question_id: QuestionId, viewer: ViewerId, favorite: bool
    ) -> bool:
        """Favorite or unfavorite a question. Repeating either is a no-op.

        Args:
            question_id: Question ID
            viewer: Viewer acting
            favorite: True to favorite, False to unfavorite

        Returns:
            True if the question exists, False otherwise
        """
        with logfire.span(
            "favorite_service.set_favorite",
            question_id=question_id,
            viewer=viewer,
            favorite=favorite,
        ):
            if not await self.question_service.exists(question_id):
                logfire.warn(
                    "Favorite on non-existent question", question_id=question_id
                )
                return False

            if favorite:
                changed = await self.favorite_repository.add(viewer, question_id)
            else:
                changed = await self.favorite_repository.remove(viewer, question_id)

            if not changed:
                logfire.debug("Favorite already in requested state")
            return True
