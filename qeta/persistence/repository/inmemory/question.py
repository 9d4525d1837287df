"""In-memory question repository for testing."""

import random
from datetime import datetime
from typing import Optional

from qeta.config import RankingSettings
from qeta.domain.model import Question
from qeta.domain.repository.question import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    QuestionQuery,
    QuestionRepository,
)
from qeta.domain.value import (
    QuestionId,
    QuestionOrderBy,
    SortDirection,
    TargetType,
    ViewerId,
)

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(
        self, store: InMemoryStore, ranking: RankingSettings | None = None
    ) -> None:
        self._store = store
        self._ranking = ranking or RankingSettings()

    async def find_by_id(
        self, question_id: QuestionId, record_view: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, fully hydrated."""
        question = self._store.questions.get(question_id)
        if question is None:
            return None
        if record_view:
            question = question.model_copy(update={"views": question.views + 1})
            self._store.questions[question_id] = question
        return self._store.hydrate_question(question)

    async def exists(self, question_id: QuestionId) -> bool:
        return question_id in self._store.questions

    async def find_all(self, viewer: ViewerId, query: QuestionQuery) -> list[Question]:
        """Find questions matching a query."""
        questions = self._matching(viewer, query)

        if query.random:
            questions = [random.choice(questions)] if questions else []
        else:
            order_by = query.order_by or QuestionOrderBy.CREATED
            questions.sort(
                key=lambda q: (self._sort_value(q, order_by), q.id),
                reverse=query.order == SortDirection.DESC,
            )
            offset = DEFAULT_OFFSET if query.offset is None else query.offset
            limit = DEFAULT_LIMIT if query.limit is None else query.limit
            questions = questions[offset : offset + limit]

        if not query.include_trend:
            # Trend may have been computed for ordering only
            questions = [q.model_copy(update={"trend": None}) for q in questions]
        return questions

    async def count(self, viewer: ViewerId, query: QuestionQuery) -> int:
        """Count questions matching a query, ignoring pagination."""
        return len(self._matching(viewer, query))

    async def create(
        self,
        author: ViewerId,
        title: str,
        content: str,
        tags: list[str],
        entities: list[str],
        created: datetime,
    ) -> Question:
        """Create a question."""
        question = Question(
            id=QuestionId(self._store.next_id("questions")),
            title=title,
            content=content,
            author=author,
            created=created,
            tags=tags,
            entities=entities,
        )
        self._store.questions[question.id] = question
        return self._store.hydrate_question(question)

    async def update(
        self,
        question_id: QuestionId,
        author: ViewerId,
        title: str,
        content: str,
        tags: Optional[list[str]],
        entities: Optional[list[str]],
        updated: datetime,
    ) -> Optional[Question]:
        """Update a question owned by `author`."""
        question = self._store.questions.get(question_id)
        if question is None or question.author != author:
            return None

        changes = {
            "title": title,
            "content": content,
            "updated": updated,
            "updated_by": author,
        }
        if tags is not None:
            changes["tags"] = tags
        if entities is not None:
            changes["entities"] = entities

        question = question.model_copy(update=changes)
        self._store.questions[question_id] = question
        return self._store.hydrate_question(question)

    async def delete(self, question_id: QuestionId, author: Optional[ViewerId]) -> bool:
        """Delete a question and everything attached to it."""
        question = self._store.questions.get(question_id)
        if question is None or (author is not None and question.author != author):
            return False

        answer_ids = [a.id for a in self._store.answers_of(question_id)]
        for answer_id in answer_ids:
            self._store.answers.pop(answer_id)

        targets = {(TargetType.QUESTION, question_id)} | {
            (TargetType.ANSWER, answer_id) for answer_id in answer_ids
        }
        self._store.comments = {
            i: c
            for i, c in self._store.comments.items()
            if (c.target_type, c.target_id) not in targets
        }
        self._store.votes = {
            key: v for key, v in self._store.votes.items() if key[1:] not in targets
        }
        self._store.favorites = {
            f for f in self._store.favorites if f[1] != question_id
        }
        del self._store.questions[question_id]
        return True

    def _matching(self, viewer: ViewerId, query: QuestionQuery) -> list[Question]:
        questions = [
            self._store.hydrate_question(
                q,
                answers=query.include_answers,
                comments=query.include_comments,
                votes=query.include_votes,
                entities=query.include_entities,
                trend=self._ranking
                if query.include_trend or query.order_by == QuestionOrderBy.TREND
                else None,
            )
            for q in self._store.questions.values()
            if self._filter(viewer, q, query)
        ]
        return questions

    def _filter(self, viewer: ViewerId, question: Question, query: QuestionQuery) -> bool:
        store = self._store
        if query.author and question.author != query.author:
            return False
        if query.tags and not set(query.tags) & set(question.tags):
            return False
        if query.entity and query.entity not in question.entities:
            return False
        if query.favorite and (viewer, question.id) not in store.favorites:
            return False
        if query.no_answers and store.answers_of(question.id):
            return False
        if query.no_correct_answer and any(
            a.correct for a in store.answers_of(question.id)
        ):
            return False
        if query.no_votes and store.votes_on(TargetType.QUESTION, question.id):
            return False
        if query.search_query:
            needle = query.search_query.lower()
            if (
                needle not in question.title.lower()
                and needle not in question.content.lower()
            ):
                return False
        return True

    def _sort_value(self, question: Question, order_by: QuestionOrderBy):
        if order_by == QuestionOrderBy.VIEWS:
            return question.views
        if order_by == QuestionOrderBy.SCORE:
            return question.score
        if order_by == QuestionOrderBy.ANSWERS_COUNT:
            return question.answers_count
        if order_by == QuestionOrderBy.UPDATED:
            return question.updated or question.created
        if order_by == QuestionOrderBy.TREND:
            return question.trend or 0.0
        return question.created
