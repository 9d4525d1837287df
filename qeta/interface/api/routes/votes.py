"""Vote and favorite routes.

Every route accepts GET as well as POST; deployed clients call them with GET.
"""

from typing import Optional, Union

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from qeta.application.projection import AnswerView, QuestionView
from qeta.application.usecase.favorite import FavoriteRequest, FavoriteUseCase
from qeta.application.usecase.vote import VoteRequest, VoteUseCase
from qeta.domain.service import IdentityService
from qeta.domain.value import VoteScore
from qeta.interface.api.dependencies import Credentials, RecordId

router = APIRouter(prefix="/questions", tags=["votes"], route_class=DishkaRoute)

_METHODS = ["GET", "POST"]


async def _vote(
    use_case: VoteUseCase,
    viewer: str,
    question_id: int,
    answer_id: Optional[int],
    score: VoteScore,
) -> Union[QuestionView, AnswerView]:
    view = await use_case.execute(
        VoteRequest(
            viewer=viewer,
            question_id=question_id,
            answer_id=answer_id,
            score=score,
        )
    )
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return view


@router.api_route(
    "/{question_id}/upvote",
    methods=_METHODS,
    response_model=QuestionView,
    response_model_exclude_none=True,
)
async def upvote_question(
    question_id: RecordId,
    use_case: FromDishka[VoteUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Upvote a question, replacing any earlier vote by the viewer."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _vote(use_case, viewer, question_id, None, VoteScore.UP)


@router.api_route(
    "/{question_id}/downvote",
    methods=_METHODS,
    response_model=QuestionView,
    response_model_exclude_none=True,
)
async def downvote_question(
    question_id: RecordId,
    use_case: FromDishka[VoteUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Downvote a question, replacing any earlier vote by the viewer."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _vote(use_case, viewer, question_id, None, VoteScore.DOWN)


@router.api_route(
    "/{question_id}/answers/{answer_id}/upvote",
    methods=_METHODS,
    response_model=AnswerView,
    response_model_exclude_none=True,
)
async def upvote_answer(
    question_id: RecordId,
    answer_id: RecordId,
    use_case: FromDishka[VoteUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Upvote an answer."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _vote(use_case, viewer, question_id, answer_id, VoteScore.UP)


@router.api_route(
    "/{question_id}/answers/{answer_id}/downvote",
    methods=_METHODS,
    response_model=AnswerView,
    response_model_exclude_none=True,
)
async def downvote_answer(
    question_id: RecordId,
    answer_id: RecordId,
    use_case: FromDishka[VoteUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> AnswerView:
    """Downvote an answer."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _vote(use_case, viewer, question_id, answer_id, VoteScore.DOWN)


async def _favorite(
    use_case: FavoriteUseCase, viewer: str, question_id: int, favorite: bool
) -> QuestionView:
    view = await use_case.execute(
        FavoriteRequest(viewer=viewer, question_id=question_id, favorite=favorite)
    )
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return view


@router.api_route(
    "/{question_id}/favorite",
    methods=_METHODS,
    response_model=QuestionView,
    response_model_exclude_none=True,
)
async def favorite_question(
    question_id: RecordId,
    use_case: FromDishka[FavoriteUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Add a question to the viewer's favorites. Repeating is a no-op."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _favorite(use_case, viewer, question_id, favorite=True)


@router.api_route(
    "/{question_id}/unfavorite",
    methods=_METHODS,
    response_model=QuestionView,
    response_model_exclude_none=True,
)
async def unfavorite_question(
    question_id: RecordId,
    use_case: FromDishka[FavoriteUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: Credentials,
) -> QuestionView:
    """Remove a question from the viewer's favorites."""
    viewer = identity_service.resolve_viewer(credentials)
    return await _favorite(use_case, viewer, question_id, favorite=False)
