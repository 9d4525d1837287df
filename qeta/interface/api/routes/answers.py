"""Answer routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, ConfigDict, Field

from qeta.application.projection import AnswerView
from qeta.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    GetAnswerRequest,
    GetAnswerUseCase,
    MarkAnswerRequest,
    MarkAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from qeta.domain.service import IdentityService
from qeta.interface.api.dependencies import Credentials, RecordId

router = APIRouter(
    prefix="/questions/{question_id}/answers",
    tags=["answers"],
    route_class=DishkaRoute,
)


class AnswerAPIRequest(BaseModel):
    """API request for posting or editing an answer."""

    model_config = ConfigDict(extra="forbid")

    answer: str = Field(min_length=1)


@router.post(
    "",
    response_model=AnswerView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: RecordId,
    request: AnswerAPIRequest,
    use_case: FromDishka[CreateAnswerUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Answer a question.

    Raises:
        HTTPException: If the question doesn't exist
    """
    viewer = identity_service.resolve_viewer(credentials)
    answer = await use_case.execute(
        CreateAnswerRequest(
            viewer=viewer, question_id=question_id, content=request.answer
        )
    )
    if answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return answer


@router.post(
    "/{answer_id}",
    response_model=AnswerView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def update_answer(
    question_id: RecordId,
    answer_id: RecordId,
    request: AnswerAPIRequest,
    use_case: FromDishka[UpdateAnswerUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Edit an answer. Only its author can edit.

    Raises:
        HTTPException: If the answer doesn't exist under the question or
            the viewer didn't write it
    """
    viewer = identity_service.resolve_viewer(credentials)
    answer = await use_case.execute(
        UpdateAnswerRequest(
            viewer=viewer,
            question_id=question_id,
            answer_id=answer_id,
            content=request.answer,
        )
    )
    if answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return answer


@router.get(
    "/{answer_id}", response_model=AnswerView, response_model_exclude_none=True
)
async def get_answer(
    question_id: RecordId,
    answer_id: RecordId,
    use_case: FromDishka[GetAnswerUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Get a single answer, personalized for the viewer."""
    viewer = identity_service.resolve_viewer(credentials)
    answer = await use_case.execute(
        GetAnswerRequest(viewer=viewer, question_id=question_id, answer_id=answer_id)
    )
    if answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return answer


@router.delete("/{answer_id}")
async def delete_answer(
    question_id: RecordId,
    answer_id: RecordId,
    use_case: FromDishka[DeleteAnswerUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> Response:
    """Delete an answer with its comments and votes."""
    viewer = identity_service.resolve_viewer(credentials)
    deleted = await use_case.execute(
        DeleteAnswerRequest(
            viewer=viewer, question_id=question_id, answer_id=answer_id
        )
    )
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


async def _mark(
    use_case: MarkAnswerUseCase,
    viewer: str,
    question_id: int,
    answer_id: int,
    correct: bool,
) -> Response:
    with logfire.span(
        "api.mark_answer",
        question_id=question_id,
        answer_id=answer_id,
        correct=correct,
    ):
        marked = await use_case.execute(
            MarkAnswerRequest(
                viewer=viewer,
                question_id=question_id,
                answer_id=answer_id,
                correct=correct,
            )
        )
    if not marked:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)


@router.api_route("/{answer_id}/correct", methods=["GET", "POST"])
async def mark_correct(
    question_id: RecordId,
    answer_id: RecordId,
    use_case: FromDishka[MarkAnswerUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> Response:
    """Mark an answer as the accepted one.

    Only the question author can mark. Any previously accepted answer
    under the question loses its flag.
    """
    viewer = identity_service.resolve_viewer(credentials)
    return await _mark(use_case, viewer, question_id, answer_id, correct=True)


@router.api_route("/{answer_id}/incorrect", methods=["GET", "POST"])
async def mark_incorrect(
    question_id: RecordId,
    answer_id: RecordId,
    use_case: FromDishka[MarkAnswerUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> Response:
    """Clear the accepted flag of an answer. Only the question author can."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _mark(use_case, viewer, question_id, answer_id, correct=False)
