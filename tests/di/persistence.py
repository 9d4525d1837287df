"""Mock persistence providers for testing."""

from dishka import Scope, provide

from qeta.config import Settings
from qeta.domain.repository import (
    AnswerRepository,
    CommentRepository,
    FavoriteRepository,
    QuestionRepository,
    TagRepository,
    VoteRepository,
)
from qeta.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryFavoriteRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryTagRepository,
    InMemoryVoteRepository,
)
from qeta.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the container, so every request of one test sees the
    same data. Each test builds its own container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_question_repository(
        self, store: InMemoryStore, settings: Settings
    ) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(store, settings.ranking)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, store: InMemoryStore) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_favorite_repository(self, store: InMemoryStore) -> FavoriteRepository:
        """Provide in-memory favorite repository."""
        return InMemoryFavoriteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)
