"""Tag domain service."""

import logfire

from qeta.domain.model.tag import Tag
from qeta.domain.repository import TagRepository


class TagService:
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self) -> list[Tag]:
        """Get all known tags.

        Returns:
            Tags ordered by name
        """
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags
