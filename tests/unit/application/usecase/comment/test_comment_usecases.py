"""Unit tests for comment use cases."""

import pytest

from qeta.application.projection import AnswerView, QuestionView
from qeta.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from qeta.domain.service import AnswerService, QuestionService
from qeta.domain.value import ViewerId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


class TestCreateCommentUseCase:
    @pytest.mark.asyncio
    async def test_comment_question_returns_question(self, unit_env):
        """Commenting a question should return it, re-enriched."""
        use_case = await unit_env.get(CreateCommentUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])

        view = await use_case.execute(
            CreateCommentRequest(viewer=BOB, question_id=question.id, content="Why?")
        )

        assert isinstance(view, QuestionView)
        assert view.own is False
        assert view.comments[0].content == "Why?"
        assert view.comments[0].own is True

    @pytest.mark.asyncio
    async def test_comment_answer_returns_answer(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        answer = await answer_service.create_answer(question.id, BOB, "A")

        view = await use_case.execute(
            CreateCommentRequest(
                viewer=ALICE,
                question_id=question.id,
                answer_id=answer.id,
                content="Thanks",
            )
        )

        assert isinstance(view, AnswerView)
        assert view.id == answer.id
        assert [c.content for c in view.comments] == ["Thanks"]

    @pytest.mark.asyncio
    async def test_answer_must_belong_to_question(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        first = await question_service.create_question(ALICE, "Q1", "C", [], [])
        second = await question_service.create_question(ALICE, "Q2", "C", [], [])
        answer = await answer_service.create_answer(first.id, BOB, "A")

        view = await use_case.execute(
            CreateCommentRequest(
                viewer=ALICE, question_id=second.id, answer_id=answer.id, content="?"
            )
        )

        assert view is None

    @pytest.mark.asyncio
    async def test_missing_question_returns_none(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        assert (
            await use_case.execute(
                CreateCommentRequest(viewer=BOB, question_id=404, content="?")
            )
            is None
        )


class TestDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_delete_returns_parent_without_comment(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        view = await create.execute(
            CreateCommentRequest(viewer=BOB, question_id=question.id, content="Hmm")
        )

        result = await delete.execute(
            DeleteCommentRequest(
                viewer=BOB, question_id=question.id, comment_id=view.comments[0].id
            )
        )

        assert result.comments == []

    @pytest.mark.asyncio
    async def test_delete_by_other_viewer_returns_none(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        view = await create.execute(
            CreateCommentRequest(viewer=BOB, question_id=question.id, content="Hmm")
        )

        result = await delete.execute(
            DeleteCommentRequest(
                viewer=ALICE, question_id=question.id, comment_id=view.comments[0].id
            )
        )

        assert result is None
