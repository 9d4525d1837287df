"""Favorite use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qeta.application.projection import QuestionView, enrich_question
from qeta.domain.service import FavoriteService, QuestionService
from qeta.domain.value import QuestionId, ViewerId


class FavoriteRequest(BaseModel):
    """Favorite request."""

    viewer: str
    question_id: int
    favorite: bool  # False to unfavorite


class FavoriteUseCase:
    """Use case for favoriting and unfavoriting a question."""

    def __init__(
        self, favorite_service: FavoriteService, question_service: QuestionService
    ) -> None:
        self.favorite_service = favorite_service
        self.question_service = question_service

    async def execute(self, request: FavoriteRequest) -> Optional[QuestionView]:
        """Execute favorite flow.

        Repeating a favorite or unfavorite succeeds without changing state.

        Returns:
            The question, or None if it doesn't exist
        """
        viewer = ViewerId(request.viewer)
        question_id = QuestionId(request.question_id)

        with logfire.span(
            "favorite.execute",
            question_id=request.question_id,
            favorite=request.favorite,
        ):
            found = await self.favorite_service.set_favorite(
                question_id, viewer, request.favorite
            )
            if not found:
                return None
            question = await self.question_service.get_question(question_id)
            return enrich_question(viewer, question)
