"""Delete answer use case."""

import logfire
from pydantic import BaseModel

from qeta.domain.service import AnswerService, PermissionGate
from qeta.domain.value import AnswerId, QuestionId, ViewerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    viewer: str
    question_id: int
    answer_id: int


class DeleteAnswerUseCase:
    """Use case for deleting an answer with its comments and votes."""

    def __init__(
        self, answer_service: AnswerService, permission_gate: PermissionGate
    ) -> None:
        self.answer_service = answer_service
        self.permission_gate = permission_gate

    async def execute(self, request: DeleteAnswerRequest) -> bool:
        """Execute delete answer flow.

        Returns:
            True if the answer was deleted
        """
        viewer = ViewerId(request.viewer)
        author = None if self.permission_gate.can_moderate(viewer) else viewer

        with logfire.span(
            "delete_answer.execute",
            answer_id=request.answer_id,
            viewer=viewer,
            moderated=author is None,
        ):
            return await self.answer_service.delete_answer(
                QuestionId(request.question_id), AnswerId(request.answer_id), author
            )
