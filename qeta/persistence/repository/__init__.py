"""PostgreSQL repository implementations."""

from qeta.persistence.repository.answer import PostgresAnswerRepository
from qeta.persistence.repository.comment import PostgresCommentRepository
from qeta.persistence.repository.favorite import PostgresFavoriteRepository
from qeta.persistence.repository.question import PostgresQuestionRepository
from qeta.persistence.repository.tag import PostgresTagRepository
from qeta.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresFavoriteRepository",
    "PostgresTagRepository",
]
