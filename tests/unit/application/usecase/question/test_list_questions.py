"""Unit tests for ListQuestionsUseCase."""

import pytest

from qeta.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qeta.domain.error import PermissionDeniedError
from qeta.domain.repository import QuestionQuery
from qeta.domain.service import (
    AnswerService,
    PolicyPermissionGate,
    QuestionService,
    ViewTranslator,
)
from qeta.domain.value import ViewerId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


async def _seed(unit_env):
    """Three questions: unanswered, answered, answered with a correct answer."""
    question_service = await unit_env.get(QuestionService)
    answer_service = await unit_env.get(AnswerService)

    unanswered = await question_service.create_question(ALICE, "Q1", "C", [], [])
    answered = await question_service.create_question(ALICE, "Q2", "C", [], [])
    solved = await question_service.create_question(ALICE, "Q3", "C", [], [])

    await answer_service.create_answer(answered.id, BOB, "Maybe")
    answer = await answer_service.create_answer(solved.id, BOB, "Yes")
    await answer_service.mark_answer(solved.id, answer.id, ALICE, True)
    return unanswered, answered, solved


class TestNamedViews:
    """Named views should hold their filter guarantees."""

    @pytest.mark.asyncio
    async def test_unanswered_never_returns_answered_question(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        unanswered, _, _ = await _seed(unit_env)

        for _ in range(5):
            response = await use_case.execute(
                ListQuestionsRequest(viewer=ALICE, view="unanswered")
            )
            assert [q.id for q in response.questions] == [unanswered.id]
            assert response.total == 1

    @pytest.mark.asyncio
    async def test_incorrect_never_returns_solved_question(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        _, _, solved = await _seed(unit_env)

        for _ in range(10):
            response = await use_case.execute(
                ListQuestionsRequest(viewer=ALICE, view="incorrect")
            )
            assert len(response.questions) == 1
            assert response.questions[0].id != solved.id
            assert response.questions[0].correct_answer is False

    @pytest.mark.asyncio
    async def test_hot_populates_trend(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        await _seed(unit_env)

        response = await use_case.execute(ListQuestionsRequest(viewer=ALICE, view="hot"))

        assert len(response.questions) == 3
        trends = [q.trend for q in response.questions]
        assert all(t is not None for t in trends)
        assert trends == sorted(trends, reverse=True)

    @pytest.mark.asyncio
    async def test_plain_listing_has_no_trend(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        await _seed(unit_env)

        response = await use_case.execute(
            ListQuestionsRequest(
                viewer=ALICE, filters=QuestionQuery(include_answers=True)
            )
        )

        assert all(q.trend is None for q in response.questions)
        assert all(q.answers is not None for q in response.questions)


class TestListPermissions:
    @pytest.mark.asyncio
    async def test_read_permission_required(self, unit_env):
        """A viewer without read permission should be denied."""
        use_case = ListQuestionsUseCase(
            question_service=await unit_env.get(QuestionService),
            view_translator=ViewTranslator(),
            permission_gate=PolicyPermissionGate(rules={"qeta.read": [ALICE]}),
        )

        await use_case.execute(ListQuestionsRequest(viewer=ALICE))
        with pytest.raises(PermissionDeniedError):
            await use_case.execute(ListQuestionsRequest(viewer=BOB))
