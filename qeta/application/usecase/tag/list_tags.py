"""List tags use case."""

import logfire

from qeta.domain.service import TagService


class ListTagsUseCase:
    """Use case for listing known tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> list[str]:
        """Execute list tags flow.

        Returns:
            Names of all known tags, sorted
        """
        with logfire.span("list_tags.execute"):
            tags = await self.tag_service.get_all_tags()
            return sorted(tag.tag for tag in tags)
