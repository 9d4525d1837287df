"""Create question use case."""

import logfire
from pydantic import BaseModel, Field

from qeta.application.projection import QuestionView, enrich_question
from qeta.domain.service import PermissionGate, QuestionService
from qeta.domain.value import Permission, ViewerId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    viewer: str  # Resolved from the request identity, never from the body
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[str] = []
    entities: list[str] = []


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, permission_gate: PermissionGate
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            permission_gate: Permission gate
        """
        self.question_service = question_service
        self.permission_gate = permission_gate

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            Created question, personalized for the author

        Raises:
            PermissionDeniedError: If the viewer may not create questions
        """
        viewer = ViewerId(request.viewer)

        with logfire.span("create_question.execute", viewer=viewer):
            self.permission_gate.check(viewer, Permission.CREATE_QUESTION)

            question = await self.question_service.create_question(
                author=viewer,
                title=request.title,
                content=request.content,
                tags=request.tags,
                entities=request.entities,
            )
            return enrich_question(viewer, question)
