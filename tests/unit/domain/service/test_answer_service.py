"""Unit tests for AnswerService."""

import pytest

from qeta.domain.service import AnswerService, QuestionService
from qeta.domain.value import AnswerId, QuestionId, ViewerId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")
CAROL = ViewerId("user:default/carol")


async def _question(unit_env, author: ViewerId = ALICE):
    service = await unit_env.get(QuestionService)
    return await service.create_question(author, "Question", "Content", [], [])


class TestCreateAnswer:
    @pytest.mark.asyncio
    async def test_create_answer(self, unit_env):
        """Answer should be attached to its question."""
        service = await unit_env.get(AnswerService)
        question = await _question(unit_env)

        answer = await service.create_answer(question.id, BOB, "Use the new backend")

        assert answer.question_id == question.id
        assert answer.author == BOB
        assert answer.correct is False

    @pytest.mark.asyncio
    async def test_answer_to_missing_question_returns_none(self, unit_env):
        service = await unit_env.get(AnswerService)

        assert await service.create_answer(QuestionId(404), BOB, "Answer") is None


class TestGetAnswer:
    @pytest.mark.asyncio
    async def test_answer_of_another_question_is_not_found(self, unit_env):
        """The answer must belong to the question it is looked up under."""
        service = await unit_env.get(AnswerService)
        first = await _question(unit_env)
        second = await _question(unit_env)
        answer = await service.create_answer(first.id, BOB, "Answer")

        assert await service.get_answer(second.id, answer.id) is None
        assert (await service.get_answer(first.id, answer.id)).id == answer.id


class TestUpdateAndDeleteAnswer:
    @pytest.mark.asyncio
    async def test_only_author_updates(self, unit_env):
        service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer = await service.create_answer(question.id, BOB, "Answer")

        assert await service.update_answer(question.id, answer.id, ALICE, "X") is None
        updated = await service.update_answer(question.id, answer.id, BOB, "Better")

        assert updated.content == "Better"
        assert updated.updated_by == BOB

    @pytest.mark.asyncio
    async def test_only_author_or_moderator_deletes(self, unit_env):
        service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer = await service.create_answer(question.id, BOB, "Answer")

        assert await service.delete_answer(question.id, answer.id, ALICE) is False
        assert await service.delete_answer(question.id, answer.id, None) is True
        assert await service.get_answer(question.id, answer.id) is None


class TestMarkAnswer:
    """Tests for mark_answer method."""

    @pytest.mark.asyncio
    async def test_marking_new_answer_clears_previous(self, unit_env):
        """At most one answer per question may be correct."""
        service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        question = await _question(unit_env)
        first = await service.create_answer(question.id, BOB, "First")
        second = await service.create_answer(question.id, CAROL, "Second")

        assert await service.mark_answer(question.id, first.id, ALICE, True) is True
        assert await service.mark_answer(question.id, second.id, ALICE, True) is True

        fetched = await question_service.get_question(question.id)
        correct = [a.id for a in fetched.answers if a.correct]
        assert correct == [second.id]
        assert fetched.correct_answer is True

    @pytest.mark.asyncio
    async def test_non_question_author_cannot_mark(self, unit_env):
        """Only the question author may change correctness."""
        service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer = await service.create_answer(question.id, BOB, "Answer")

        # The answer author is not the question author either
        assert await service.mark_answer(question.id, answer.id, BOB, True) is False

        fetched = await service.get_answer(question.id, answer.id)
        assert fetched.correct is False

    @pytest.mark.asyncio
    async def test_mark_incorrect(self, unit_env):
        service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer = await service.create_answer(question.id, BOB, "Answer")
        await service.mark_answer(question.id, answer.id, ALICE, True)

        assert await service.mark_answer(question.id, answer.id, ALICE, False) is True

        assert (await service.get_answer(question.id, answer.id)).correct is False

    @pytest.mark.asyncio
    async def test_missing_answer_cannot_be_marked(self, unit_env):
        service = await unit_env.get(AnswerService)
        question = await _question(unit_env)

        assert (
            await service.mark_answer(question.id, AnswerId(404), ALICE, True) is False
        )
