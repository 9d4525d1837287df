"""Vote domain service."""

from datetime import datetime

import logfire

from qeta.domain.model.vote import Vote
from qeta.domain.repository import VoteRepository
from qeta.domain.value import AnswerId, QuestionId, TargetType, ViewerId, VoteScore

from .answer_service import AnswerService
from .question_service import QuestionService


class VoteService:
    """Domain service for vote operations.

    A viewer holds at most one vote per question or answer; voting again
    replaces the previous vote instead of stacking.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def vote_question(
        self, question_id: QuestionId, voter: ViewerId, score: VoteScore
    ) -> bool:
        """Cast or replace a vote on a question.

        Args:
            question_id: Question ID
            voter: Viewer voting
            score: +1 or -1

        Returns:
            True if the vote was stored, False if the question doesn't exist
        """
        with logfire.span(
            "vote_service.vote_question",
            question_id=question_id,
            voter=voter,
            score=int(score),
        ):
            if not await self.question_service.exists(question_id):
                logfire.warn("Vote on non-existent question", question_id=question_id)
                return False

            await self.vote_repository.upsert(
                Vote(
                    voter=voter,
                    target_type=TargetType.QUESTION,
                    target_id=question_id,
                    score=score,
                    created=datetime.now(),
                )
            )
            return True

    async def vote_answer(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        voter: ViewerId,
        score: VoteScore,
    ) -> bool:
        """Cast or replace a vote on an answer of a question.

        Returns:
            True if the vote was stored, False if the answer doesn't exist
            under the question
        """
        with logfire.span(
            "vote_service.vote_answer",
            answer_id=answer_id,
            voter=voter,
            score=int(score),
        ):
            answer = await self.answer_service.get_answer(question_id, answer_id)
            if answer is None:
                return False

            await self.vote_repository.upsert(
                Vote(
                    voter=voter,
                    target_type=TargetType.ANSWER,
                    target_id=answer_id,
                    score=score,
                    created=datetime.now(),
                )
            )
            return True
