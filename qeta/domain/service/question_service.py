"""Question domain service."""

from datetime import datetime
from typing import Optional

import logfire

from qeta.domain.error import NotAuthorizedError, NotFoundError
from qeta.domain.model.question import Question
from qeta.domain.repository import QuestionQuery, QuestionRepository, TagRepository
from qeta.domain.value import QuestionId, ViewerId


class QuestionService:
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_repository: TagRepository
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_repository: Tag repository
        """
        self.question_repository = question_repository
        self.tag_repository = tag_repository

    async def create_question(
        self,
        author: ViewerId,
        title: str,
        content: str,
        tags: list[str],
        entities: list[str],
    ) -> Question:
        """Create a question.

        Args:
            author: Author resolved from the request identity
            title: Question title
            content: Question body
            tags: Tag names, created when unknown
            entities: Referenced entity refs

        Returns:
            Created question
        """
        with logfire.span(
            "question_service.create_question", author=author, tags=tags
        ):
            known_tags = await self.tag_repository.ensure(tags)
            question = await self.question_repository.create(
                author=author,
                title=title,
                content=content,
                tags=[tag.tag for tag in known_tags],
                entities=list(dict.fromkeys(entities)),
                created=datetime.now(),
            )
            logfire.info("Question created", question_id=question.id, author=author)
            return question

    async def get_question(
        self, question_id: QuestionId, record_view: bool = False
    ) -> Question | None:
        """Get a fully hydrated question.

        Args:
            question_id: Question ID
            record_view: Whether this read counts as a view

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question",
            question_id=question_id,
            record_view=record_view,
        ):
            question = await self.question_repository.find_by_id(
                question_id, record_view=record_view
            )
            if question is None:
                logfire.warn("Question not found", question_id=question_id)
            return question

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        return await self.question_repository.exists(question_id)

    async def list_questions(
        self, viewer: ViewerId, query: QuestionQuery
    ) -> tuple[list[Question], int]:
        """List questions matching a canonical query.

        Args:
            viewer: Viewer the listing runs for
            query: Canonical query descriptor

        Returns:
            Tuple of (questions, total matches)
        """
        with logfire.span(
            "question_service.list_questions",
            viewer=viewer,
            **query.model_dump(mode="json", exclude_defaults=True),
        ):
            questions = await self.question_repository.find_all(viewer, query)
            total = await self.question_repository.count(viewer, query)
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def update_question(
        self,
        viewer: ViewerId,
        question_id: QuestionId,
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
        entities: Optional[list[str]] = None,
    ) -> Question:
        """Update a question as its author.

        Args:
            viewer: Viewer acting
            question_id: Question ID
            title: New title
            content: New content
            tags: New tag names, None to keep the current ones
            entities: New entity refs, None to keep the current ones

        Returns:
            Updated question

        Raises:
            NotFoundError: If the question doesn't exist
            NotAuthorizedError: If the viewer isn't the author
        """
        with logfire.span(
            "question_service.update_question", question_id=question_id, viewer=viewer
        ):
            current = await self.question_repository.find_by_id(question_id)
            if current is None:
                raise NotFoundError("Question", question_id)
            if current.author != viewer:
                logfire.warn(
                    "Non-author question update attempt",
                    question_id=question_id,
                    viewer=viewer,
                )
                raise NotAuthorizedError("question", question_id, viewer)

            if tags is not None:
                tags = [tag.tag for tag in await self.tag_repository.ensure(tags)]
            if entities is not None:
                entities = list(dict.fromkeys(entities))

            updated = await self.question_repository.update(
                question_id=question_id,
                author=viewer,
                title=title,
                content=content,
                tags=tags,
                entities=entities,
                updated=datetime.now(),
            )
            if updated is None:
                # Deleted between the ownership check and the write
                raise NotFoundError("Question", question_id)

            logfire.info("Question updated", question_id=question_id)
            return updated

    async def delete_question(
        self, question_id: QuestionId, author: ViewerId | None
    ) -> bool:
        """Delete a question with its answers, comments, votes and favorites.

        Args:
            question_id: Question ID
            author: Author restriction, None for a moderator delete

        Returns:
            True if deleted
        """
        with logfire.span(
            "question_service.delete_question", question_id=question_id, author=author
        ):
            deleted = await self.question_repository.delete(question_id, author)
            if deleted:
                logfire.info("Question deleted", question_id=question_id)
            else:
                logfire.warn(
                    "Question not found or not owned for delete",
                    question_id=question_id,
                )
            return deleted
