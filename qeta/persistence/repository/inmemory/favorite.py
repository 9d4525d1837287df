"""In-memory favorite repository for testing."""

from qeta.domain.repository.favorite import FavoriteRepository
from qeta.domain.value import QuestionId, ViewerId

from .store import InMemoryStore


class InMemoryFavoriteRepository(FavoriteRepository):
    """In-memory implementation of FavoriteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def add(self, viewer: ViewerId, question_id: QuestionId) -> bool:
        key = (viewer, question_id)
        if key in self._store.favorites:
            return False
        self._store.favorites.add(key)
        return True

    async def remove(self, viewer: ViewerId, question_id: QuestionId) -> bool:
        key = (viewer, question_id)
        if key not in self._store.favorites:
            return False
        self._store.favorites.remove(key)
        return True
