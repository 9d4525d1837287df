"""Domain value objects for the Q&A domain."""

from qeta.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    ViewerId,
)
from qeta.domain.value.types import (
    Permission,
    QuestionOrderBy,
    SortDirection,
    TargetType,
    VoteScore,
)

__all__ = [
    # Identifiers
    "QuestionId",
    "AnswerId",
    "CommentId",
    "TagId",
    "ViewerId",
    # Types
    "Permission",
    "QuestionOrderBy",
    "SortDirection",
    "TargetType",
    "VoteScore",
]
