"""Create answer use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from qeta.application.projection import AnswerView, enrich_answer
from qeta.domain.service import AnswerService, PermissionGate
from qeta.domain.value import Permission, QuestionId, ViewerId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    viewer: str
    question_id: int
    content: str = Field(min_length=1)


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self, answer_service: AnswerService, permission_gate: PermissionGate
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            permission_gate: Permission gate
        """
        self.answer_service = answer_service
        self.permission_gate = permission_gate

    async def execute(self, request: CreateAnswerRequest) -> Optional[AnswerView]:
        """Execute create answer flow.

        Returns:
            Created answer, or None if the question doesn't exist

        Raises:
            PermissionDeniedError: If the viewer may not answer
        """
        viewer = ViewerId(request.viewer)
        self.permission_gate.check(viewer, Permission.CREATE_ANSWER)

        with logfire.span(
            "create_answer.execute", question_id=request.question_id, viewer=viewer
        ):
            answer = await self.answer_service.create_answer(
                question_id=QuestionId(request.question_id),
                author=viewer,
                content=request.content,
            )
            return enrich_answer(viewer, answer)
