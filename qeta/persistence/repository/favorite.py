"""PostgreSQL implementation of Favorite repository."""

from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.domain.repository import FavoriteRepository
from qeta.domain.value import QuestionId, ViewerId
from qeta.persistence.tables import favorites_table


class PostgresFavoriteRepository(FavoriteRepository):
    """PostgreSQL implementation of FavoriteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, viewer: ViewerId, question_id: QuestionId) -> bool:
        """Favorite a question; a duplicate is ignored."""
        stmt = (
            insert(favorites_table)
            .values(author=viewer, question_id=question_id, created=datetime.now())
            .on_conflict_do_nothing(
                index_elements=[favorites_table.c.author, favorites_table.c.question_id]
            )
            .returning(favorites_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        added = result.fetchone() is not None
        await self.session.flush()
        return added

    async def remove(self, viewer: ViewerId, question_id: QuestionId) -> bool:
        """Unfavorite a question."""
        stmt = (
            delete(favorites_table)
            .where(
                favorites_table.c.author == viewer,
                favorites_table.c.question_id == question_id,
            )
            .returning(favorites_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        removed = result.fetchone() is not None
        await self.session.flush()
        return removed
