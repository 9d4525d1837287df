"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from qeta.domain.model import Comment
from qeta.domain.repository.comment import CommentRepository
from qeta.domain.value import CommentId, TargetType, ViewerId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create(
        self,
        target_type: TargetType,
        target_id: int,
        author: ViewerId,
        content: str,
        created: datetime,
    ) -> Optional[Comment]:
        """Attach a comment to an existing question or answer."""
        targets = (
            self._store.questions
            if target_type == TargetType.QUESTION
            else self._store.answers
        )
        if target_id not in targets:
            return None

        comment = Comment(
            id=CommentId(self._store.next_id("comments")),
            target_type=target_type,
            target_id=target_id,
            author=author,
            content=content,
            created=created,
        )
        self._store.comments[comment.id] = comment
        return comment

    async def delete(
        self,
        comment_id: CommentId,
        target_type: TargetType,
        target_id: int,
        author: Optional[ViewerId],
    ) -> bool:
        """Delete a comment of the given target."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return False
        if comment.target_type != target_type or comment.target_id != target_id:
            return False
        if author is not None and comment.author != author:
            return False
        del self._store.comments[comment_id]
        return True
