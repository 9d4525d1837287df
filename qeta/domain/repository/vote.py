"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qeta.domain.model.vote import Vote
from qeta.domain.value import TargetType, ViewerId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are keyed by (voter, target_type, target_id).
    """

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, replacing any vote by the same voter on the target.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def find_by_voter_and_target(
        self, voter: ViewerId, target_type: TargetType, target_id: int
    ) -> Optional[Vote]:
        """Find a viewer's vote on a specific item.

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(self, target_type: TargetType, target_id: int) -> List[Vote]:
        """Find all votes on a specific item.

        Returns:
            List of votes on the item
        """
        pass
