"""Tag repository interface."""

from abc import ABC, abstractmethod

from qeta.domain.model.tag import Tag


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all known tags, ordered by name."""
        pass

    @abstractmethod
    async def ensure(self, names: list[str]) -> list[Tag]:
        """Return tags for the given names, creating the missing ones.

        Args:
            names: Tag names

        Returns:
            Tags in the order of `names`, without duplicates
        """
        pass
