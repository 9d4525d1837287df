"""Delete comment use case."""

from typing import Optional, Union

import logfire
from pydantic import BaseModel

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
from qeta.domain.value import (
    AnswerId,
    CommentId,
    Permission,
    QuestionId,
    TargetType,
    ViewerId,
)


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    viewer: str
    question_id: int
    answer_id: Optional[int] = None
    comment_id: int


class DeleteCommentUseCase:
    """Use case for deleting a comment of a question or an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        question_service: QuestionService,
        answer_service: AnswerService,
        permission_gate: PermissionGate,
    ) -> None:
        self.comment_service = comment_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.permission_gate = permission_gate

    async def execute(
        self, request: DeleteCommentRequest
    ) -> Optional[Union[QuestionView, AnswerView]]:
        """Execute delete comment flow.

        The comment must belong to the parent named in the request. Authors
        delete their own comments; moderators delete any.

        Returns:
            The parent after deletion, or None if nothing was deleted
        """
        viewer = ViewerId(request.viewer)
        question_id = QuestionId(request.question_id)
        comment_id = CommentId(request.comment_id)
        author = None if self.permission_gate.can_moderate(viewer) else viewer

        with logfire.span(
            "delete_comment.execute",
            comment_id=request.comment_id,
            question_id=request.question_id,
            answer_id=request.answer_id,
            viewer=viewer,
        ):
            if request.answer_id is None:
                self.permission_gate.check(viewer, Permission.READ)
                deleted = await self.comment_service.delete_comment(
                    comment_id, TargetType.QUESTION, question_id, author
                )
                if not deleted:
                    return None
                question = await self.question_service.get_question(question_id)
                return enrich_question(viewer, question)

            answer_id = AnswerId(request.answer_id)
            if await self.answer_service.get_answer(question_id, answer_id) is None:
                return None

            deleted = await self.comment_service.delete_comment(
                comment_id, TargetType.ANSWER, answer_id, author
            )
            if not deleted:
                return None
            answer = await self.answer_service.get_answer(question_id, answer_id)
            return enrich_answer(viewer, answer)
