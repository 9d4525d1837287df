"""Comment domain service."""

from datetime import datetime

import logfire

from qeta.domain.model.comment import Comment
from qeta.domain.repository import CommentRepository
from qeta.domain.value import CommentId, TargetType, ViewerId


class CommentService:
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        target_type: TargetType,
        target_id: int,
        author: ViewerId,
        content: str,
    ) -> Comment | None:
        """Comment a question or answer.

        Args:
            target_type: Type of the commented entity
            target_id: ID of the commented entity
            author: Author resolved from the request identity
            content: Comment text

        Returns:
            Created comment, or None if the target doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            target_type=target_type.value,
            target_id=target_id,
            author=author,
        ):
            comment = await self.comment_repository.create(
                target_type=target_type,
                target_id=target_id,
                author=author,
                content=content,
                created=datetime.now(),
            )
            if comment is None:
                logfire.warn(
                    "Comment on non-existent target",
                    target_type=target_type.value,
                    target_id=target_id,
                )
            else:
                logfire.info("Comment created", comment_id=comment.id)
            return comment

    async def delete_comment(
        self,
        comment_id: CommentId,
        target_type: TargetType,
        target_id: int,
        author: ViewerId | None,
    ) -> bool:
        """Delete a comment of the given parent.

        The comment must belong to the parent; a comment ID of another
        entity is treated as not found.

        Args:
            comment_id: Comment ID
            target_type: Type of the parent entity
            target_id: ID of the parent entity
            author: Author restriction, None for a moderator delete

        Returns:
            True if deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            target_type=target_type.value,
            target_id=target_id,
        ):
            deleted = await self.comment_repository.delete(
                comment_id, target_type, target_id, author
            )
            if deleted:
                logfire.info("Comment deleted", comment_id=comment_id)
            else:
                logfire.warn(
                    "Comment not found, foreign or not owned for delete",
                    comment_id=comment_id,
                )
            return deleted
