"""Create comment use case."""

from typing import Optional, Union

import logfire
from pydantic import BaseModel, Field

from qeta.application.projection import (
    AnswerView,
    QuestionView,
    enrich_answer,
    enrich_question,
)
from qeta.domain.service import (
    AnswerService,
    CommentService,
    PermissionGate,
    QuestionService,
)
from qeta.domain.value import AnswerId, Permission, QuestionId, TargetType, ViewerId


class CreateCommentRequest(BaseModel):
    """Create comment request.

    The comment goes on the answer when `answer_id` is set, on the
    question otherwise.
    """

    viewer: str
    question_id: int
    answer_id: Optional[int] = None
    content: str = Field(min_length=1)


class CreateCommentUseCase:
    """Use case for commenting a question or an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        question_service: QuestionService,
        answer_service: AnswerService,
        permission_gate: PermissionGate,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            question_service: Question domain service
            answer_service: Answer domain service
            permission_gate: Permission gate
        """
        self.comment_service = comment_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.permission_gate = permission_gate

    async def execute(
        self, request: CreateCommentRequest
    ) -> Optional[Union[QuestionView, AnswerView]]:
        """Execute create comment flow.

        Steps:
        1. Verify the parent exists (an answer must belong to the question)
        2. Create the comment
        3. Re-fetch the parent and personalize it for the response

        Returns:
            The commented question or answer, or None if the parent
            doesn't exist
        """
        viewer = ViewerId(request.viewer)
        question_id = QuestionId(request.question_id)

        with logfire.span(
            "create_comment.execute",
            question_id=request.question_id,
            answer_id=request.answer_id,
            viewer=viewer,
        ):
            if request.answer_id is None:
                self.permission_gate.check(viewer, Permission.READ)
                comment = await self.comment_service.create_comment(
                    TargetType.QUESTION, question_id, viewer, request.content
                )
                if comment is None:
                    return None
                question = await self.question_service.get_question(question_id)
                return enrich_question(viewer, question)

            answer_id = AnswerId(request.answer_id)
            if await self.answer_service.get_answer(question_id, answer_id) is None:
                return None

            comment = await self.comment_service.create_comment(
                TargetType.ANSWER, answer_id, viewer, request.content
            )
            if comment is None:
                return None
            answer = await self.answer_service.get_answer(question_id, answer_id)
            return enrich_answer(viewer, answer)
