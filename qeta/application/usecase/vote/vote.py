"""Vote use case."""

from typing import Optional, Union

import logfire
from pydantic import BaseModel

from qeta.application.projection import (
    AnswerView,
    QuestionView,
    enrich_answer,
    enrich_question,
)
from qeta.domain.service import AnswerService, QuestionService, VoteService
from qeta.domain.value import AnswerId, QuestionId, ViewerId, VoteScore


class VoteRequest(BaseModel):
    """Vote request.

    The vote goes on the answer when `answer_id` is set, on the question
    otherwise.
    """

    viewer: str
    question_id: int
    answer_id: Optional[int] = None
    score: VoteScore


class VoteUseCase:
    """Use case for upvoting or downvoting a question or an answer."""

    def __init__(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_service = vote_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(
        self, request: VoteRequest
    ) -> Optional[Union[QuestionView, AnswerView]]:
        """Execute vote flow.

        Replaces any earlier vote of the viewer on the same item, then
        re-fetches the item. The response's `ownVote` is the score just
        cast.

        Returns:
            The voted question or answer, or None if it doesn't exist
        """
        viewer = ViewerId(request.viewer)
        question_id = QuestionId(request.question_id)

        with logfire.span(
            "vote.execute",
            question_id=request.question_id,
            answer_id=request.answer_id,
            score=int(request.score),
        ):
            if request.answer_id is None:
                voted = await self.vote_service.vote_question(
                    question_id, viewer, request.score
                )
                if not voted:
                    return None
                view = enrich_question(
                    viewer, await self.question_service.get_question(question_id)
                )
            else:
                answer_id = AnswerId(request.answer_id)
                voted = await self.vote_service.vote_answer(
                    question_id, answer_id, viewer, request.score
                )
                if not voted:
                    return None
                view = enrich_answer(
                    viewer,
                    await self.answer_service.get_answer(question_id, answer_id),
                )

            if view is None:
                return None
            return view.model_copy(update={"own_vote": int(request.score)})
