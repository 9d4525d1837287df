"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .favorite import InMemoryFavoriteRepository
from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryFavoriteRepository",
    "InMemoryQuestionRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryVoteRepository",
]
