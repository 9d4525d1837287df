"""Get question use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qeta.application.projection import QuestionView, enrich_question
from qeta.domain.service import PermissionGate, QuestionService
from qeta.domain.value import Permission, QuestionId, ViewerId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    viewer: str
    question_id: int


class GetQuestionUseCase:
    """Use case for reading a question with its answers."""

    def __init__(
        self, question_service: QuestionService, permission_gate: PermissionGate
    ) -> None:
        self.question_service = question_service
        self.permission_gate = permission_gate

    async def execute(self, request: GetQuestionRequest) -> Optional[QuestionView]:
        """Execute get question flow.

        The read counts as a view of the question.

        Returns:
            Personalized question if found, None otherwise
        """
        viewer = ViewerId(request.viewer)
        self.permission_gate.check(viewer, Permission.READ)

        with logfire.span(
            "get_question.execute", question_id=request.question_id, viewer=viewer
        ):
            question = await self.question_service.get_question(
                QuestionId(request.question_id), record_view=True
            )
            return enrich_question(viewer, question)
