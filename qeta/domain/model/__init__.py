"""Domain model entities for the Q&A domain."""

from qeta.domain.model.answer import Answer
from qeta.domain.model.comment import Comment
from qeta.domain.model.question import Question
from qeta.domain.model.tag import Tag
from qeta.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "Comment",
    "Vote",
    "Tag",
]
