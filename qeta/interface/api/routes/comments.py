"""Comment routes for questions and answers."""

from typing import Union

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from qeta.application.projection import AnswerView, QuestionView
from qeta.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from qeta.domain.service import IdentityService
from qeta.interface.api.dependencies import Credentials, RecordId

router = APIRouter(prefix="/questions", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for posting a comment."""

    model_config = ConfigDict(extra="forbid")

    content: str = Field(min_length=1)


def _found(
    view: Union[QuestionView, AnswerView, None],
) -> Union[QuestionView, AnswerView]:
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return view


@router.post(
    "/{question_id}/comments",
    response_model=QuestionView,
    response_model_exclude_none=True,
)
async def comment_question(
    question_id: RecordId,
    request: CommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Comment on a question. Returns the updated question."""
    viewer = identity_service.resolve_viewer(credentials)
    return _found(
        await use_case.execute(
            CreateCommentRequest(
                viewer=viewer, question_id=question_id, content=request.content
            )
        )
    )


@router.delete(
    "/{question_id}/comments/{comment_id}",
    response_model=QuestionView,
    response_model_exclude_none=True,
)
async def delete_question_comment(
    question_id: RecordId,
    comment_id: RecordId,
    use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Delete a comment from a question. Returns the updated question."""
    viewer = identity_service.resolve_viewer(credentials)
    return _found(
        await use_case.execute(
            DeleteCommentRequest(
                viewer=viewer, question_id=question_id, comment_id=comment_id
            )
        )
    )


@router.post(
    "/{question_id}/answers/{answer_id}/comments",
    response_model=AnswerView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def comment_answer(
    question_id: RecordId,
    answer_id: RecordId,
    request: CommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Comment on an answer. Returns the updated answer."""
    viewer = identity_service.resolve_viewer(credentials)
    return _found(
        await use_case.execute(
            CreateCommentRequest(
                viewer=viewer,
                question_id=question_id,
                answer_id=answer_id,
                content=request.content,
            )
        )
    )


@router.delete(
    "/{question_id}/answers/{answer_id}/comments/{comment_id}",
    response_model=AnswerView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def delete_answer_comment(
    question_id: RecordId,
    answer_id: RecordId,
    comment_id: RecordId,
    use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Delete a comment from an answer. Returns the updated answer."""
    viewer = identity_service.resolve_viewer(credentials)
    return _found(
        await use_case.execute(
            DeleteCommentRequest(
                viewer=viewer,
                question_id=question_id,
                answer_id=answer_id,
                comment_id=comment_id,
            )
        )
    )
