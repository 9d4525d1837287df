"""Tag entity for categorizing questions."""

from pydantic import Field

from qeta.domain.model.common import DomainModel
from qeta.domain.value import TagId


class Tag(DomainModel):
    """Tag entity.

    Tags are created on first use by a question and never removed.
    """

    id: TagId
    tag: str = Field(min_length=1, max_length=255)
