"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from qeta.domain.model.answer import Answer
from qeta.domain.model.comment import Comment
from qeta.domain.model.common import DomainModel
from qeta.domain.model.vote import Vote
from qeta.domain.value import QuestionId, ViewerId


class Question(DomainModel):
    """Question aggregate root.

    Nested collections are hydrated by the content store on request:
    `answers` is None when answers were not loaded, as opposed to an empty
    list for a question without answers. Aggregates (`score`,
    `answers_count`, `correct_answer`, `favorites`) are always populated.
    """

    id: QuestionId
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author: ViewerId
    created: datetime = Field(default_factory=datetime.now)
    updated: Optional[datetime] = None
    updated_by: Optional[ViewerId] = None
    tags: list[str] = []
    entities: list[str] = []
    views: int = Field(default=0, ge=0)
    score: int = 0
    answers_count: int = Field(default=0, ge=0)
    correct_answer: bool = False
    favorites: int = Field(default=0, ge=0)
    trend: Optional[float] = None
    comments: list[Comment] = []
    votes: list[Vote] = []
    answers: Optional[list[Answer]] = None
    favorited_by: list[ViewerId] = []

    @model_validator(mode="after")
    def validate_single_correct_answer(self) -> "Question":
        """At most one answer of a question may be marked correct."""
        if self.answers and sum(1 for a in self.answers if a.correct) > 1:
            raise ValueError(
                f"Question {self.id} has more than one correct answer"
            )
        return self
