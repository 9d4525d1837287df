"""Shared state of the in-memory content store.

Repositories of one store see each other's writes, the way tables of one
database do. Aggregates are computed on read, never stored.
"""

from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import Iterator, Optional

from qeta.config import RankingSettings
from qeta.domain.model import Answer, Comment, Question, Tag, Vote
from qeta.domain.value import QuestionId, TargetType, ViewerId

VoteKey = tuple[ViewerId, TargetType, int]


@dataclass
class InMemoryStore:
    """Rows of every entity, keyed like their PostgreSQL counterparts."""

    questions: dict[int, Question] = field(default_factory=dict)
    answers: dict[int, Answer] = field(default_factory=dict)
    comments: dict[int, Comment] = field(default_factory=dict)
    votes: dict[VoteKey, Vote] = field(default_factory=dict)
    favorites: set[tuple[ViewerId, QuestionId]] = field(default_factory=set)
    tags: dict[str, Tag] = field(default_factory=dict)
    ids: dict[str, Iterator[int]] = field(default_factory=dict)

    def next_id(self, kind: str) -> int:
        """Next identifier of a sequence, starting at 1."""
        return next(self.ids.setdefault(kind, count(1)))

    def votes_on(self, target_type: TargetType, target_id: int) -> list[Vote]:
        return [
            v
            for (_, t, i), v in self.votes.items()
            if t == target_type and i == target_id
        ]

    def comments_on(self, target_type: TargetType, target_id: int) -> list[Comment]:
        comments = [
            c
            for c in self.comments.values()
            if c.target_type == target_type and c.target_id == target_id
        ]
        return sorted(comments, key=lambda c: (c.created, c.id))

    def answers_of(self, question_id: int) -> list[Answer]:
        answers = [a for a in self.answers.values() if a.question_id == question_id]
        return sorted(answers, key=lambda a: (a.created, a.id))

    def hydrate_answer(self, answer: Answer) -> Answer:
        votes = self.votes_on(TargetType.ANSWER, answer.id)
        return answer.model_copy(
            update={
                "score": sum(int(v.score) for v in votes),
                "votes": votes,
                "comments": self.comments_on(TargetType.ANSWER, answer.id),
            }
        )

    def hydrate_question(
        self,
        question: Question,
        answers: bool = True,
        comments: bool = True,
        votes: bool = True,
        entities: bool = True,
        trend: Optional[RankingSettings] = None,
    ) -> Question:
        """Attach aggregates and the requested nested collections."""
        question_votes = self.votes_on(TargetType.QUESTION, question.id)
        question_answers = self.answers_of(question.id)
        favorited_by = sorted(v for v, q in self.favorites if q == question.id)
        score = sum(int(v.score) for v in question_votes)

        update = {
            "score": score,
            "answers_count": len(question_answers),
            "correct_answer": any(a.correct for a in question_answers),
            "favorites": len(favorited_by),
            "favorited_by": favorited_by,
            "votes": question_votes if votes else [],
            "comments": (
                self.comments_on(TargetType.QUESTION, question.id) if comments else []
            ),
            "answers": (
                [self.hydrate_answer(a) for a in question_answers] if answers else None
            ),
        }
        if not entities:
            update["entities"] = []
        if trend is not None:
            update["trend"] = trend_score(
                score, len(question_answers), question.created, trend
            )
        return question.model_copy(update=update)


def trend_score(
    score: int,
    answers_count: int,
    created: datetime,
    ranking: RankingSettings,
    now: Optional[datetime] = None,
) -> float:
    """Time-decayed popularity: (score + answers + 1) / (age_hours + offset)^gravity."""
    age = (now or datetime.now()) - created
    age_hours = max(age.total_seconds() / 3600, 0)
    return (score + answers_count + 1) / (
        (age_hours + ranking.time_offset) ** ranking.gravity
    )
