"""Unit tests for answer use cases."""

import pytest

from qeta.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    GetAnswerRequest,
    GetAnswerUseCase,
    MarkAnswerRequest,
    MarkAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from qeta.domain.error import PermissionDeniedError
from qeta.domain.service import (
    AnswerService,
    PolicyPermissionGate,
    QuestionService,
)
from qeta.domain.value import ViewerId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


async def _question(unit_env):
    service = await unit_env.get(QuestionService)
    return await service.create_question(ALICE, "Question", "Content", [], [])


class TestCreateAnswerUseCase:
    @pytest.mark.asyncio
    async def test_create_answer_is_own(self, unit_env):
        use_case = await unit_env.get(CreateAnswerUseCase)
        question = await _question(unit_env)

        view = await use_case.execute(
            CreateAnswerRequest(viewer=BOB, question_id=question.id, content="A")
        )

        assert view.own is True
        assert view.own_vote is None
        assert view.question_id == question.id

    @pytest.mark.asyncio
    async def test_missing_question_returns_none(self, unit_env):
        use_case = await unit_env.get(CreateAnswerUseCase)

        assert (
            await use_case.execute(
                CreateAnswerRequest(viewer=BOB, question_id=404, content="A")
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_create_answer_permission_required(self, unit_env):
        question = await _question(unit_env)
        use_case = CreateAnswerUseCase(
            answer_service=await unit_env.get(AnswerService),
            permission_gate=PolicyPermissionGate(rules={"qeta.create.answer": []}),
        )

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(
                CreateAnswerRequest(viewer=BOB, question_id=question.id, content="A")
            )


class TestUpdateAndGetAnswer:
    @pytest.mark.asyncio
    async def test_update_by_other_viewer_returns_none(self, unit_env):
        create = await unit_env.get(CreateAnswerUseCase)
        update = await unit_env.get(UpdateAnswerUseCase)
        get = await unit_env.get(GetAnswerUseCase)
        question = await _question(unit_env)
        answer = await create.execute(
            CreateAnswerRequest(viewer=BOB, question_id=question.id, content="A")
        )

        result = await update.execute(
            UpdateAnswerRequest(
                viewer=ALICE,
                question_id=question.id,
                answer_id=answer.id,
                content="Hijack",
            )
        )

        assert result is None
        fetched = await get.execute(
            GetAnswerRequest(viewer=ALICE, question_id=question.id, answer_id=answer.id)
        )
        assert fetched.content == "A"
        assert fetched.own is False


class TestMarkAnswerUseCase:
    @pytest.mark.asyncio
    async def test_non_author_mark_leaves_state_unchanged(self, unit_env):
        """Only the question author may accept an answer."""
        create = await unit_env.get(CreateAnswerUseCase)
        mark = await unit_env.get(MarkAnswerUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await _question(unit_env)
        answer = await create.execute(
            CreateAnswerRequest(viewer=BOB, question_id=question.id, content="A")
        )

        marked = await mark.execute(
            MarkAnswerRequest(
                viewer=BOB, question_id=question.id, answer_id=answer.id, correct=True
            )
        )

        assert marked is False
        fetched = await question_service.get_question(question.id)
        assert fetched.correct_answer is False

    @pytest.mark.asyncio
    async def test_author_mark_sets_flag(self, unit_env):
        create = await unit_env.get(CreateAnswerUseCase)
        mark = await unit_env.get(MarkAnswerUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await _question(unit_env)
        answer = await create.execute(
            CreateAnswerRequest(viewer=BOB, question_id=question.id, content="A")
        )

        assert await mark.execute(
            MarkAnswerRequest(
                viewer=ALICE, question_id=question.id, answer_id=answer.id, correct=True
            )
        )

        assert (await question_service.get_question(question.id)).correct_answer
