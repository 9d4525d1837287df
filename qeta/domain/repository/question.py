"""Question repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from qeta.domain.model.question import Question
from qeta.domain.value import QuestionId, QuestionOrderBy, SortDirection, ViewerId

# Pagination applied when a query leaves limit/offset unset
DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


class QuestionQuery(BaseModel):
    """Canonical, fully-resolved question listing query.

    Filters narrow the result set; `include_*` toggles only control which
    nested collections the store hydrates. `random` asks the store for a
    single arbitrarily chosen match instead of a page.
    """

    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    tags: Optional[list[str]] = None
    entity: Optional[str] = None
    author: Optional[str] = None
    order_by: Optional[QuestionOrderBy] = None
    order: SortDirection = SortDirection.DESC
    no_correct_answer: bool = False
    no_answers: bool = False
    favorite: bool = False
    no_votes: bool = False
    search_query: Optional[str] = None
    random: bool = False
    include_answers: bool = False
    include_votes: bool = False
    include_entities: bool = False
    include_trend: bool = False
    include_comments: bool = False


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, record_view: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, fully hydrated.

        Args:
            question_id: The question's unique identifier
            record_view: Whether to increment the view counter first

        Returns:
            The question with answers, comments, votes and favorites,
            or None if not found
        """
        pass

    @abstractmethod
    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists.

        Args:
            question_id: The question's unique identifier

        Returns:
            True if the question exists
        """
        pass

    @abstractmethod
    async def find_all(self, viewer: ViewerId, query: QuestionQuery) -> List[Question]:
        """Find questions matching a query.

        Args:
            viewer: Viewer the query runs for (used by the favorite filter)
            query: Canonical query descriptor

        Returns:
            The requested page, or at most one question for random queries
        """
        pass

    @abstractmethod
    async def count(self, viewer: ViewerId, query: QuestionQuery) -> int:
        """Count questions matching a query, ignoring pagination.

        Args:
            viewer: Viewer the query runs for
            query: Canonical query descriptor

        Returns:
            Total number of matching questions
        """
        pass

    @abstractmethod
    async def create(
        self,
        author: ViewerId,
        title: str,
        content: str,
        tags: list[str],
        entities: list[str],
        created: datetime,
    ) -> Question:
        """Create a question.

        Unknown tags are created on the fly.

        Returns:
            The created question, hydrated
        """
        pass

    @abstractmethod
    async def update(
        self,
        question_id: QuestionId,
        author: ViewerId,
        title: str,
        content: str,
        tags: Optional[list[str]],
        entities: Optional[list[str]],
        updated: datetime,
    ) -> Optional[Question]:
        """Update a question owned by `author`.

        Tags and entities are replaced when given and kept when None.

        Returns:
            The updated question, or None if it doesn't exist or isn't
            owned by `author`
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId, author: Optional[ViewerId]) -> bool:
        """Delete a question and everything attached to it.

        Args:
            question_id: The question ID
            author: Restrict deletion to this author, None for no restriction

        Returns:
            True if a question was deleted
        """
        pass
