"""Unit tests for CommentService."""

import pytest

from qeta.domain.service import AnswerService, CommentService, QuestionService
from qeta.domain.value import CommentId, TargetType, ViewerId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_comment_question(self, unit_env):
        """Comment should appear on its question."""
        service = await unit_env.get(CommentService)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])

        comment = await service.create_comment(
            TargetType.QUESTION, question.id, BOB, "Which version?"
        )

        fetched = await question_service.get_question(question.id)
        assert [c.id for c in fetched.comments] == [comment.id]
        assert fetched.comments[0].author == BOB

    @pytest.mark.asyncio
    async def test_comment_missing_target_returns_none(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.create_comment(TargetType.ANSWER, 404, BOB, "?") is None


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_comment_of_another_parent_is_not_deleted(self, unit_env):
        """A comment can only be deleted through its own parent."""
        service = await unit_env.get(CommentService)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        answer = await answer_service.create_answer(question.id, BOB, "A")
        comment = await service.create_comment(
            TargetType.ANSWER, answer.id, BOB, "Note"
        )

        assert not await service.delete_comment(
            comment.id, TargetType.QUESTION, question.id, BOB
        )
        assert await service.delete_comment(
            comment.id, TargetType.ANSWER, answer.id, BOB
        )

    @pytest.mark.asyncio
    async def test_only_author_or_moderator_deletes(self, unit_env):
        service = await unit_env.get(CommentService)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(ALICE, "Q", "C", [], [])
        comment = await service.create_comment(
            TargetType.QUESTION, question.id, BOB, "Note"
        )

        assert not await service.delete_comment(
            comment.id, TargetType.QUESTION, question.id, ALICE
        )
        assert await service.delete_comment(
            comment.id, TargetType.QUESTION, question.id, None
        )
        assert not await service.delete_comment(
            CommentId(comment.id), TargetType.QUESTION, question.id, None
        )
