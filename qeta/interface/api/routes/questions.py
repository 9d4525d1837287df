"""Question routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, ConfigDict, Field

from qeta.application.projection import QuestionView
from qeta.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qeta.domain.service import IdentityService
from qeta.interface.api.dependencies import (
    Credentials,
    QuestionFiltersQuery,
    RecordId,
)

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class QuestionAPIRequest(BaseModel):
    """API request for creating a question."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[str] = []
    entities: list[str] = []


class UpdateQuestionAPIRequest(BaseModel):
    """API request for updating a question.

    Omitted tags or entities keep their current values.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: Optional[list[str]] = None
    entities: Optional[list[str]] = None


@router.get(
    "", response_model=ListQuestionsResponse, response_model_exclude_none=True
)
async def list_questions(
    filters: QuestionFiltersQuery,
    use_case: FromDishka[ListQuestionsUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> ListQuestionsResponse:
    """List questions.

    Listings carry aggregates only, they are the same for every viewer.
    """
    viewer = identity_service.resolve_viewer(credentials)
    return await use_case.execute(ListQuestionsRequest(viewer=viewer, filters=filters))


# Declared before /{question_id} so "list" is never parsed as an ID
@router.get(
    "/list/{view}",
    response_model=ListQuestionsResponse,
    response_model_exclude_none=True,
)
async def list_questions_view(
    view: str,
    filters: QuestionFiltersQuery,
    use_case: FromDishka[ListQuestionsUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> ListQuestionsResponse:
    """List questions through a named view.

    Known views are "unanswered", "incorrect" and "hot"; their filters
    override the query string. Other names list with the query string as is.

    Example:
        GET /questions/list/hot?limit=5
    """
    viewer = identity_service.resolve_viewer(credentials)
    with logfire.span("api.list_questions_view", view=view):
        return await use_case.execute(
            ListQuestionsRequest(viewer=viewer, view=view, filters=filters)
        )


@router.get(
    "/{question_id}", response_model=QuestionView, response_model_exclude_none=True
)
async def get_question(
    question_id: RecordId,
    use_case: FromDishka[GetQuestionUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Get a question with its answers, personalized for the viewer.

    Raises:
        HTTPException: If the question doesn't exist
    """
    viewer = identity_service.resolve_viewer(credentials)
    question = await use_case.execute(
        GetQuestionRequest(viewer=viewer, question_id=question_id)
    )
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return question


@router.post(
    "",
    response_model=QuestionView,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    request: QuestionAPIRequest,
    use_case: FromDishka[CreateQuestionUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Ask a question.

    The author is the requesting viewer. Unknown tags are created.
    """
    viewer = identity_service.resolve_viewer(credentials)
    return await use_case.execute(
        CreateQuestionRequest(
            viewer=viewer,
            title=request.title,
            content=request.content,
            tags=request.tags,
            entities=request.entities,
        )
    )


@router.post(
    "/{question_id}", response_model=QuestionView, response_model_exclude_none=True
)
async def update_question(
    question_id: RecordId,
    request: UpdateQuestionAPIRequest,
    use_case: FromDishka[UpdateQuestionUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Edit a question. Only its author can edit.

    A non-author edit is rejected with 401, a missing question with 404.
    """
    viewer = identity_service.resolve_viewer(credentials)
    return await use_case.execute(
        UpdateQuestionRequest(
            viewer=viewer,
            question_id=question_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
            entities=request.entities,
        )
    )


@router.delete("/{question_id}")
async def delete_question(
    question_id: RecordId,
    use_case: FromDishka[DeleteQuestionUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> Response:
    """Delete a question with its answers, comments, votes and favorites.

    Raises:
        HTTPException: If the question doesn't exist or the viewer may not
            delete it
    """
    viewer = identity_service.resolve_viewer(credentials)
    deleted = await use_case.execute(
        DeleteQuestionRequest(viewer=viewer, question_id=question_id)
    )
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)
