"""In-memory answer repository for testing."""

from datetime import datetime
from typing import Optional

from qeta.domain.model import Answer
from qeta.domain.repository.answer import AnswerRepository
from qeta.domain.value import AnswerId, QuestionId, TargetType, ViewerId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        answer = self._store.answers.get(answer_id)
        return self._store.hydrate_answer(answer) if answer else None

    async def create(
        self,
        question_id: QuestionId,
        author: ViewerId,
        content: str,
        created: datetime,
    ) -> Optional[Answer]:
        if question_id not in self._store.questions:
            return None
        answer = Answer(
            id=AnswerId(self._store.next_id("answers")),
            question_id=question_id,
            author=author,
            content=content,
            created=created,
        )
        self._store.answers[answer.id] = answer
        return self._store.hydrate_answer(answer)

    async def update(
        self,
        answer_id: AnswerId,
        question_id: QuestionId,
        author: ViewerId,
        content: str,
        updated: datetime,
    ) -> Optional[Answer]:
        answer = self._owned(answer_id, question_id, author)
        if answer is None:
            return None
        answer = answer.model_copy(
            update={"content": content, "updated": updated, "updated_by": author}
        )
        self._store.answers[answer_id] = answer
        return self._store.hydrate_answer(answer)

    async def delete(
        self,
        answer_id: AnswerId,
        question_id: QuestionId,
        author: Optional[ViewerId],
    ) -> bool:
        answer = self._store.answers.get(answer_id)
        if answer is None or answer.question_id != question_id:
            return False
        if author is not None and answer.author != author:
            return False

        target = (TargetType.ANSWER, answer_id)
        self._store.comments = {
            i: c
            for i, c in self._store.comments.items()
            if (c.target_type, c.target_id) != target
        }
        self._store.votes = {
            key: v for key, v in self._store.votes.items() if key[1:] != target
        }
        del self._store.answers[answer_id]
        return True

    async def mark_correct(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        if not self._is_question_author(question_id, answer_id, author):
            return False
        for answer in self._store.answers_of(question_id):
            self._store.answers[answer.id] = answer.model_copy(
                update={"correct": answer.id == answer_id}
            )
        return True

    async def mark_incorrect(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        if not self._is_question_author(question_id, answer_id, author):
            return False
        answer = self._store.answers[answer_id]
        self._store.answers[answer_id] = answer.model_copy(update={"correct": False})
        return True

    def _owned(
        self, answer_id: AnswerId, question_id: QuestionId, author: ViewerId
    ) -> Optional[Answer]:
        answer = self._store.answers.get(answer_id)
        if answer is None or answer.question_id != question_id:
            return None
        if answer.author != author:
            return None
        return answer

    def _is_question_author(
        self, question_id: QuestionId, answer_id: AnswerId, author: ViewerId
    ) -> bool:
        question = self._store.questions.get(question_id)
        answer = self._store.answers.get(answer_id)
        return (
            question is not None
            and answer is not None
            and answer.question_id == question_id
            and question.author == author
        )
