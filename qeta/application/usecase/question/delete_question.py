"""Delete question use case."""

import logfire
from pydantic import BaseModel

from qeta.domain.service import PermissionGate, QuestionService
from qeta.domain.value import QuestionId, ViewerId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    viewer: str
    question_id: int


class DeleteQuestionUseCase:
    """Use case for deleting a question with everything attached to it."""

    def __init__(
        self, question_service: QuestionService, permission_gate: PermissionGate
    ) -> None:
        self.question_service = question_service
        self.permission_gate = permission_gate

    async def execute(self, request: DeleteQuestionRequest) -> bool:
        """Execute delete question flow.

        Authors delete their own questions; moderators delete any.

        Returns:
            True if the question was deleted
        """
        viewer = ViewerId(request.viewer)
        author = None if self.permission_gate.can_moderate(viewer) else viewer

        with logfire.span(
            "delete_question.execute",
            question_id=request.question_id,
            viewer=viewer,
            moderated=author is None,
        ):
            return await self.question_service.delete_question(
                QuestionId(request.question_id), author
            )
