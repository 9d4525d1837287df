"""Mark answer correct/incorrect use case."""

import logfire
from pydantic import BaseModel

from qeta.domain.service import AnswerService
from qeta.domain.value import AnswerId, QuestionId, ViewerId


class MarkAnswerRequest(BaseModel):
    """Mark answer request."""

    viewer: str
    question_id: int
    answer_id: int
    correct: bool


class MarkAnswerUseCase:
    """Use case for accepting or un-accepting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize mark answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: MarkAnswerRequest) -> bool:
        """Execute mark answer flow.

        Only the question author can change correctness; for anyone else
        nothing changes and the result is False.

        Args:
            request: Mark answer request

        Returns:
            True if the correctness flag was changed as requested
        """
        with logfire.span(
            "mark_answer.execute",
            question_id=request.question_id,
            answer_id=request.answer_id,
            correct=request.correct,
        ):
            return await self.answer_service.mark_answer(
                question_id=QuestionId(request.question_id),
                answer_id=AnswerId(request.answer_id),
                viewer=ViewerId(request.viewer),
                correct=request.correct,
            )
