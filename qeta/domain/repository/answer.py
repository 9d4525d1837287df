"""Answer repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from qeta.domain.model.answer import Answer
from qeta.domain.value import AnswerId, QuestionId, ViewerId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, with comments, votes and score.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self,
        question_id: QuestionId,
        author: ViewerId,
        content: str,
        created: datetime,
    ) -> Optional[Answer]:
        """Create an answer to a question.

        Returns:
            The created answer, or None if the question doesn't exist
        """
        pass

    @abstractmethod
    async def update(
        self,
        answer_id: AnswerId,
        question_id: QuestionId,
        author: ViewerId,
        content: str,
        updated: datetime,
    ) -> Optional[Answer]:
        """Update an answer owned by `author` under `question_id`.

        Returns:
            The updated answer, or None if nothing matched
        """
        pass

    @abstractmethod
    async def delete(
        self,
        answer_id: AnswerId,
        question_id: QuestionId,
        author: Optional[ViewerId],
    ) -> bool:
        """Delete an answer and its comments and votes.

        Args:
            answer_id: The answer ID
            question_id: The question the answer must belong to
            author: Restrict deletion to this author, None for no restriction

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def mark_correct(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        """Mark an answer correct, clearing any previously correct answer.

        Both changes happen atomically. Only the question author may do this.

        Args:
            question_id: The question ID
            answer_id: The answer to mark correct
            author: Viewer acting, must be the question author

        Returns:
            True if the answer is now the correct one
        """
        pass

    @abstractmethod
    async def mark_incorrect(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        """Clear the correctness flag of an answer.

        Args:
            question_id: The question ID
            answer_id: The answer to unmark
            author: Viewer acting, must be the question author

        Returns:
            True if the answer exists under a question owned by `author`
        """
        pass
