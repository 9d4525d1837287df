"""Comment entity.

Comments are flat, ordered discussions attached to a question or an answer.
"""

from datetime import datetime

from pydantic import Field

from qeta.domain.model.common import DomainModel
from qeta.domain.value import CommentId, TargetType, ViewerId


class Comment(DomainModel):
    """Comment entity.

    Owned by exactly one question or answer, identified by
    (target_type, target_id). Comments are never edited; they are
    deleted by their author or a moderator.
    """

    id: CommentId
    target_type: TargetType
    target_id: int
    author: ViewerId
    content: str = Field(min_length=1)
    created: datetime = Field(default_factory=datetime.now)
