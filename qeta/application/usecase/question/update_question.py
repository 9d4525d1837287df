"""Update question use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qeta.application.projection import QuestionView, enrich_question
from qeta.domain.service import QuestionService
from qeta.domain.value import QuestionId, ViewerId


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    `tags` and `entities` left as None keep their current values.
    """

    viewer: str
    question_id: int
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: Optional[list[str]] = None
    entities: Optional[list[str]] = None


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Execute update question flow.

        Only the question author can edit.

        Returns:
            Updated question, personalized for the author

        Raises:
            NotFoundError: If the question doesn't exist
            NotAuthorizedError: If the viewer isn't the author
        """
        viewer = ViewerId(request.viewer)

        with logfire.span(
            "update_question.execute", question_id=request.question_id, viewer=viewer
        ):
            question = await self.question_service.update_question(
                viewer=viewer,
                question_id=QuestionId(request.question_id),
                title=request.title,
                content=request.content,
                tags=request.tags,
                entities=request.entities,
            )
            return enrich_question(viewer, question)
