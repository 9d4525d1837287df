"""Unit tests for VoteUseCase."""

import pytest

from qeta.application.usecase.vote import VoteRequest, VoteUseCase
from qeta.domain.service import AnswerService, QuestionService
from qeta.domain.value import ViewerId, VoteScore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


class TestVoteUseCase:
    """Tests for VoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_question_returns_enriched_question(self, unit_env):
        """The response should carry the vote just cast."""
        use_case = await unit_env.get(VoteUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])

        view = await use_case.execute(
            VoteRequest(viewer=BOB, question_id=question.id, score=VoteScore.UP)
        )

        assert view.own_vote == 1
        assert view.score == 1
        assert view.own is False

    @pytest.mark.asyncio
    async def test_revote_replaces_score(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])

        await use_case.execute(
            VoteRequest(viewer=BOB, question_id=question.id, score=VoteScore.UP)
        )
        view = await use_case.execute(
            VoteRequest(viewer=BOB, question_id=question.id, score=VoteScore.DOWN)
        )

        assert view.own_vote == -1
        assert view.score == -1

    @pytest.mark.asyncio
    async def test_vote_answer_returns_enriched_answer(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        answer = await answer_service.create_answer(question.id, BOB, "A")

        view = await use_case.execute(
            VoteRequest(
                viewer=ALICE,
                question_id=question.id,
                answer_id=answer.id,
                score=VoteScore.DOWN,
            )
        )

        assert view.id == answer.id
        assert view.own_vote == -1
        assert view.score == -1

    @pytest.mark.asyncio
    async def test_vote_on_missing_target_returns_none(self, unit_env):
        use_case = await unit_env.get(VoteUseCase)

        assert (
            await use_case.execute(
                VoteRequest(viewer=BOB, question_id=404, score=VoteScore.UP)
            )
            is None
        )
