"""Vote entity.

Each viewer holds at most one vote per question or answer. Casting a new
vote replaces the previous one.
"""

from datetime import datetime

from pydantic import Field

from qeta.domain.model.common import DomainModel
from qeta.domain.value import TargetType, ViewerId, VoteScore


class Vote(DomainModel):
    """Vote entity.

    Keyed by (voter, target_type, target_id); the key carries no surrogate
    identifier so that replacement is structural.
    """

    voter: ViewerId
    target_type: TargetType
    target_id: int
    score: VoteScore
    created: datetime = Field(default_factory=datetime.now)
