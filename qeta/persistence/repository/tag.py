"""PostgreSQL implementation of Tag repository."""

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.domain.model.tag import Tag
from qeta.domain.repository.tag import TagRepository
from qeta.persistence.mappers import row_to_tag
from qeta.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.tag)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def ensure(self, names: list[str]) -> list[Tag]:
        """Return tags for the given names, creating the missing ones."""
        names = list(dict.fromkeys(names))
        if not names:
            return []

        await self.session.execute(
            insert(tags_table)
            .values([{"tag": name} for name in names])
            .on_conflict_do_nothing(index_elements=[tags_table.c.tag])
        )
        await self.session.flush()

        result = await self.session.execute(
            select(tags_table).where(tags_table.c.tag.in_(names))
        )
        by_name = {row.tag: row_to_tag(row._asdict()) for row in result.fetchall()}
        return [by_name[name] for name in names]
