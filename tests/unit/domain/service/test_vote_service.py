"""Unit tests for VoteService."""

import pytest

from qeta.domain.repository import VoteRepository
from qeta.domain.service import AnswerService, QuestionService, VoteService
from qeta.domain.value import AnswerId, QuestionId, TargetType, ViewerId, VoteScore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


class TestVoteQuestion:
    """Tests for vote_question method."""

    @pytest.mark.asyncio
    async def test_second_vote_replaces_first(self, unit_env):
        """A viewer holds at most one vote per question."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])

        assert await vote_service.vote_question(question.id, BOB, VoteScore.UP)
        assert await vote_service.vote_question(question.id, BOB, VoteScore.DOWN)

        votes = await vote_repo.find_by_target(TargetType.QUESTION, question.id)
        assert len(votes) == 1
        assert votes[0].score == VoteScore.DOWN

        fetched = await question_service.get_question(question.id)
        assert fetched.score == -1

    @pytest.mark.asyncio
    async def test_votes_of_different_viewers_add_up(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])

        await vote_service.vote_question(question.id, ALICE, VoteScore.UP)
        await vote_service.vote_question(question.id, BOB, VoteScore.UP)

        fetched = await question_service.get_question(question.id)
        assert fetched.score == 2

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_returns_false(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        assert not await vote_service.vote_question(QuestionId(404), BOB, VoteScore.UP)
        assert await vote_repo.find_by_target(TargetType.QUESTION, 404) == []


class TestVoteAnswer:
    """Tests for vote_answer method."""

    @pytest.mark.asyncio
    async def test_vote_answer_updates_score(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        answer = await answer_service.create_answer(question.id, BOB, "A")

        assert await vote_service.vote_answer(
            question.id, answer.id, ALICE, VoteScore.UP
        )

        vote = await vote_repo.find_by_voter_and_target(
            ALICE, TargetType.ANSWER, answer.id
        )
        assert vote.score == VoteScore.UP
        assert (await answer_service.get_answer(question.id, answer.id)).score == 1

    @pytest.mark.asyncio
    async def test_vote_on_answer_of_other_question_returns_false(self, unit_env):
        """The answer must belong to the question in the request."""
        vote_service = await unit_env.get(VoteService)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        first = await question_service.create_question(ALICE, "Q1", "C", [], [])
        second = await question_service.create_question(ALICE, "Q2", "C", [], [])
        answer = await answer_service.create_answer(first.id, BOB, "A")

        assert not await vote_service.vote_answer(
            second.id, answer.id, ALICE, VoteScore.UP
        )
        assert not await vote_service.vote_answer(
            first.id, AnswerId(404), ALICE, VoteScore.UP
        )
