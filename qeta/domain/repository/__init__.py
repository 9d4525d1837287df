"""Repository interfaces for the Q&A domain.

Together they form the content store contract. Repository interfaces are
defined in the domain layer (dependency inversion); implementations live
in the persistence layer.
"""

from qeta.domain.repository.answer import AnswerRepository
from qeta.domain.repository.comment import CommentRepository
from qeta.domain.repository.favorite import FavoriteRepository
from qeta.domain.repository.question import QuestionQuery, QuestionRepository
from qeta.domain.repository.tag import TagRepository
from qeta.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "QuestionQuery",
    "AnswerRepository",
    "CommentRepository",
    "VoteRepository",
    "FavoriteRepository",
    "TagRepository",
]
