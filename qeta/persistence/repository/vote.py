"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.domain.model import Vote
from qeta.domain.repository import VoteRepository
from qeta.domain.value import TargetType, ViewerId
from qeta.persistence.mappers import row_to_vote, vote_to_dict
from qeta.persistence.repository.loaders import fetch_votes
from qeta.persistence.tables import answer_votes_table, question_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Votes live in one table per target type, keyed by (author, target).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the voter's existing one on the target."""
        table, key = _table(vote.target_type)
        stmt = insert(table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.author, key],
            set_={"score": stmt.excluded.score, "created": stmt.excluded.created},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def find_by_voter_and_target(
        self, voter: ViewerId, target_type: TargetType, target_id: int
    ) -> Optional[Vote]:
        """Find a viewer's vote on a specific item."""
        table, key = _table(target_type)
        stmt = select(table).where(table.c.author == voter, key == target_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict(), target_type) if row else None

    async def find_by_target(self, target_type: TargetType, target_id: int) -> List[Vote]:
        """Find all votes on a specific item."""
        votes = await fetch_votes(self.session, target_type, [target_id])
        return votes.get(target_id, [])


def _table(target_type: TargetType):
    if target_type == TargetType.QUESTION:
        return question_votes_table, question_votes_table.c.question_id
    return answer_votes_table, answer_votes_table.c.answer_id
