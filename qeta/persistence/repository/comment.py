"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.domain.model import Comment
from qeta.domain.repository import CommentRepository
from qeta.domain.value import CommentId, TargetType, ViewerId
from qeta.persistence.mappers import row_to_comment
from qeta.persistence.tables import answers_table, comments_table, questions_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        target_type: TargetType,
        target_id: int,
        author: ViewerId,
        content: str,
        created: datetime,
    ) -> Optional[Comment]:
        """Attach a comment to an existing question or answer."""
        parent = questions_table if target_type == TargetType.QUESTION else answers_table
        parent_exists = await self.session.execute(
            select(exists().where(parent.c.id == target_id))
        )
        if not parent_exists.scalar():
            return None

        result = await self.session.execute(
            insert(comments_table)
            .values(
                **{_parent_key(target_type): target_id},
                author=author,
                content=content,
                created=created,
            )
            .returning(comments_table)
        )
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(
        self,
        comment_id: CommentId,
        target_type: TargetType,
        target_id: int,
        author: Optional[ViewerId],
    ) -> bool:
        """Delete a comment of the given target."""
        stmt = delete(comments_table).where(
            comments_table.c.id == comment_id,
            comments_table.c[_parent_key(target_type)] == target_id,
        )
        if author is not None:
            stmt = stmt.where(comments_table.c.author == author)

        result = await self.session.execute(stmt.returning(comments_table.c.id))
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted


def _parent_key(target_type: TargetType) -> str:
    return "question_id" if target_type == TargetType.QUESTION else "answer_id"
