"""In-memory tag repository for testing."""

from qeta.domain.model import Tag
from qeta.domain.repository.tag import TagRepository
from qeta.domain.value import TagId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_all(self) -> list[Tag]:
        return sorted(self._store.tags.values(), key=lambda t: t.tag)

    async def ensure(self, names: list[str]) -> list[Tag]:
        tags = []
        for name in dict.fromkeys(names):
            tag = self._store.tags.get(name)
            if tag is None:
                tag = Tag(id=TagId(self._store.next_id("tags")), tag=name)
                self._store.tags[name] = tag
            tags.append(tag)
        return tags
