"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import delete, exists, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.domain.model import Answer
from qeta.domain.repository import AnswerRepository
from qeta.domain.value import AnswerId, QuestionId, ViewerId
from qeta.persistence.repository.loaders import fetch_answers
from qeta.persistence.tables import answers_table, questions_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        answers = await fetch_answers(self.session, answer_ids=[answer_id])
        return answers[0] if answers else None

    async def create(
        self,
        question_id: QuestionId,
        author: ViewerId,
        content: str,
        created: datetime,
    ) -> Optional[Answer]:
        """Create an answer if the question exists."""
        with logfire.span("answer_repository.create", question_id=question_id):
            question_exists = await self.session.execute(
                select(exists().where(questions_table.c.id == question_id))
            )
            if not question_exists.scalar():
                return None

            result = await self.session.execute(
                insert(answers_table)
                .values(
                    question_id=question_id,
                    author=author,
                    content=content,
                    created=created,
                )
                .returning(answers_table.c.id)
            )
            answer_id = AnswerId(result.scalar_one())
            await self.session.flush()
            return await self.find_by_id(answer_id)

    async def update(
        self,
        answer_id: AnswerId,
        question_id: QuestionId,
        author: ViewerId,
        content: str,
        updated: datetime,
    ) -> Optional[Answer]:
        """Update an answer owned by `author`."""
        result = await self.session.execute(
            update(answers_table)
            .where(
                answers_table.c.id == answer_id,
                answers_table.c.question_id == question_id,
                answers_table.c.author == author,
            )
            .values(content=content, updated=updated, updated_by=author)
            .returning(answers_table.c.id)
        )
        if result.fetchone() is None:
            return None
        await self.session.flush()
        return await self.find_by_id(answer_id)

    async def delete(
        self,
        answer_id: AnswerId,
        question_id: QuestionId,
        author: Optional[ViewerId],
    ) -> bool:
        """Delete an answer; its comments and votes cascade."""
        stmt = delete(answers_table).where(
            answers_table.c.id == answer_id,
            answers_table.c.question_id == question_id,
        )
        if author is not None:
            stmt = stmt.where(answers_table.c.author == author)

        result = await self.session.execute(stmt.returning(answers_table.c.id))
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def mark_correct(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        """Mark an answer correct, clearing any previously correct answer.

        The question row is locked for the rest of the transaction so two
        concurrent marks on one question are serialized.
        """
        with logfire.span(
            "answer_repository.mark_correct",
            question_id=question_id,
            answer_id=answer_id,
        ):
            if not await self._lock_for_question_author(question_id, answer_id, author):
                return False

            await self.session.execute(
                update(answers_table)
                .where(
                    answers_table.c.question_id == question_id,
                    answers_table.c.correct,
                )
                .values(correct=False)
            )
            await self.session.execute(
                update(answers_table)
                .where(answers_table.c.id == answer_id)
                .values(correct=True)
            )
            await self.session.flush()
            return True

    async def mark_incorrect(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        """Clear the correctness flag of an answer."""
        if not await self._lock_for_question_author(question_id, answer_id, author):
            return False

        await self.session.execute(
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(correct=False)
        )
        await self.session.flush()
        return True

    async def _lock_for_question_author(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        """Lock the question row if `author` owns it and the answer belongs to it."""
        result = await self.session.execute(
            select(questions_table.c.author)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        question_author = result.scalar()
        if question_author is None or question_author != author:
            return False

        answer_exists = await self.session.execute(
            select(
                exists().where(
                    answers_table.c.id == answer_id,
                    answers_table.c.question_id == question_id,
                )
            )
        )
        return bool(answer_exists.scalar())
