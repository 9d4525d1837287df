"""Update answer use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qeta.application.projection import AnswerView, enrich_answer
from qeta.domain.service import AnswerService
from qeta.domain.value import AnswerId, QuestionId, ViewerId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    viewer: str
    question_id: int
    answer_id: int
    content: str = Field(min_length=1)


class UpdateAnswerUseCase:
    """Use case for editing an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: UpdateAnswerRequest) -> Optional[AnswerView]:
        """Execute update answer flow.

        Returns:
            Updated answer, or None if the answer doesn't exist under the
            question or the viewer isn't its author
        """
        viewer = ViewerId(request.viewer)

        with logfire.span(
            "update_answer.execute", answer_id=request.answer_id, viewer=viewer
        ):
            answer = await self.answer_service.update_answer(
                question_id=QuestionId(request.question_id),
                answer_id=AnswerId(request.answer_id),
                author=viewer,
                content=request.content,
            )
            return enrich_answer(viewer, answer)
