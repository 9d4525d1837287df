"""Get answer use case."""

from typing import Optional

from pydantic import BaseModel

from qeta.application.projection import AnswerView, enrich_answer
from qeta.domain.service import AnswerService, PermissionGate
from qeta.domain.value import AnswerId, Permission, QuestionId, ViewerId


class GetAnswerRequest(BaseModel):
    """Get answer request."""

    viewer: str
    question_id: int
    answer_id: int


class GetAnswerUseCase:
    """Use case for reading a single answer."""

    def __init__(
        self, answer_service: AnswerService, permission_gate: PermissionGate
    ) -> None:
        self.answer_service = answer_service
        self.permission_gate = permission_gate

    async def execute(self, request: GetAnswerRequest) -> Optional[AnswerView]:
        viewer = ViewerId(request.viewer)
        self.permission_gate.check(viewer, Permission.READ)

        answer = await self.answer_service.get_answer(
            QuestionId(request.question_id), AnswerId(request.answer_id)
        )
        return enrich_answer(viewer, answer)
