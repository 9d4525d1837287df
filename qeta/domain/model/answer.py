"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qeta.domain.model.comment import Comment
from qeta.domain.model.common import DomainModel
from qeta.domain.model.vote import Vote
from qeta.domain.value import AnswerId, QuestionId, ViewerId


class Answer(DomainModel):
    """Answer entity.

    Belongs exclusively to one question. `score` is the aggregate of
    `votes` as computed by the content store.
    """

    id: AnswerId
    question_id: QuestionId
    author: ViewerId
    content: str = Field(min_length=1)
    correct: bool = False
    score: int = 0
    created: datetime = Field(default_factory=datetime.now)
    updated: Optional[datetime] = None
    updated_by: Optional[ViewerId] = None
    comments: list[Comment] = []
    votes: list[Vote] = []
