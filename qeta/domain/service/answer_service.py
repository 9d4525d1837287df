"""Answer domain service."""

from datetime import datetime

import logfire

from qeta.domain.model.answer import Answer
from qeta.domain.repository import AnswerRepository
from qeta.domain.value import AnswerId, QuestionId, ViewerId


class AnswerService:
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self, question_id: QuestionId, author: ViewerId, content: str
    ) -> Answer | None:
        """Answer a question.

        Returns:
            Created answer, or None if the question doesn't exist
        """
        with logfire.span(
            "answer_service.create_answer", question_id=question_id, author=author
        ):
            answer = await self.answer_repository.create(
                question_id=question_id,
                author=author,
                content=content,
                created=datetime.now(),
            )
            if answer is None:
                logfire.warn("Answer to non-existent question", question_id=question_id)
            else:
                logfire.info(
                    "Answer created", answer_id=answer.id, question_id=question_id
                )
            return answer

    async def get_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Answer | None:
        """Get an answer that belongs to the given question.

        Returns:
            Answer if found under the question, None otherwise
        """
        with logfire.span(
            "answer_service.get_answer", question_id=question_id, answer_id=answer_id
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if answer is None or answer.question_id != question_id:
                logfire.warn(
                    "Answer not found", question_id=question_id, answer_id=answer_id
                )
                return None
            return answer

    async def update_answer(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        author: ViewerId,
        content: str,
    ) -> Answer | None:
        """Update an answer as its author.

        Returns:
            Updated answer, or None if not found or not owned by `author`
        """
        with logfire.span(
            "answer_service.update_answer", answer_id=answer_id, author=author
        ):
            updated = await self.answer_repository.update(
                answer_id=answer_id,
                question_id=question_id,
                author=author,
                content=content,
                updated=datetime.now(),
            )
            if updated is None:
                logfire.warn(
                    "Answer not found or not owned for update", answer_id=answer_id
                )
            return updated

    async def delete_answer(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId | None
    ) -> bool:
        """Delete an answer.

        Args:
            question_id: Question the answer must belong to
            answer_id: Answer ID
            author: Author restriction, None for a moderator delete

        Returns:
            True if deleted
        """
        with logfire.span(
            "answer_service.delete_answer", answer_id=answer_id, author=author
        ):
            deleted = await self.answer_repository.delete(answer_id, question_id, author)
            if deleted:
                logfire.info("Answer deleted", answer_id=answer_id)
            return deleted

    async def mark_answer(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        viewer: ViewerId,
        correct: bool,
    ) -> bool:
        """Mark or unmark an answer as the correct one.

        Only the question author can change correctness. Marking an answer
        correct supersedes any previously correct answer.

        Returns:
            True if the change was applied
        """
        with logfire.span(
            "answer_service.mark_answer",
            question_id=question_id,
            answer_id=answer_id,
            viewer=viewer,
            correct=correct,
        ):
            if correct:
                marked = await self.answer_repository.mark_correct(
                    question_id, answer_id, viewer
                )
            else:
                marked = await self.answer_repository.mark_incorrect(
                    question_id, answer_id, viewer
                )

            if marked:
                logfire.info("Answer correctness changed", answer_id=answer_id)
            else:
                logfire.warn(
                    "Answer correctness unchanged: not found or not question author",
                    answer_id=answer_id,
                    viewer=viewer,
                )
            return marked
