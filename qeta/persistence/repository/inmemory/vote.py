"""In-memory vote repository for testing."""

from typing import Optional

from qeta.domain.model import Vote
from qeta.domain.repository.vote import VoteRepository
from qeta.domain.value import TargetType, ViewerId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are stored under their (voter, target) key, so a second vote
    overwrites the first.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def upsert(self, vote: Vote) -> Vote:
        self._store.votes[(vote.voter, vote.target_type, vote.target_id)] = vote
        return vote

    async def find_by_voter_and_target(
        self, voter: ViewerId, target_type: TargetType, target_id: int
    ) -> Optional[Vote]:
        return self._store.votes.get((voter, target_type, target_id))

    async def find_by_target(self, target_type: TargetType, target_id: int) -> list[Vote]:
        return self._store.votes_on(target_type, target_id)
