"""List questions use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from qeta.application.projection import QuestionSummary, summarize_question
from qeta.domain.repository import QuestionQuery
from qeta.domain.service import PermissionGate, QuestionService, ViewTranslator
from qeta.domain.value import Permission, ViewerId


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    viewer: str
    view: Optional[str] = None  # Named view, e.g. "unanswered"
    filters: QuestionQuery = QuestionQuery()


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionSummary]
    total: int


class ListQuestionsUseCase:
    """Use case for listing questions, optionally through a named view.

    Listings report aggregates only; they are never personalized.
    """

    def __init__(
        self,
        question_service: QuestionService,
        view_translator: ViewTranslator,
        permission_gate: PermissionGate,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            view_translator: Named view translator
            permission_gate: Permission gate
        """
        self.question_service = question_service
        self.view_translator = view_translator
        self.permission_gate = permission_gate

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Raw filters plus optional named view

        Returns:
            Matching page and the total number of matches
        """
        viewer = ViewerId(request.viewer)
        self.permission_gate.check(viewer, Permission.READ)

        with logfire.span("list_questions.execute", view=request.view, viewer=viewer):
            query = self.view_translator.translate(request.view, request.filters)
            questions, total = await self.question_service.list_questions(
                viewer, query
            )
            return ListQuestionsResponse(
                questions=[summarize_question(q) for q in questions],
                total=total,
            )
