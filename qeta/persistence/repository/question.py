"""PostgreSQL implementation of Question repository."""

from datetime import datetime
from typing import Any, List, Optional

import logfire
from sqlalchemy import (
    Float,
    Select,
    cast,
    delete,
    exists,
    extract,
    func,
    insert,
    literal,
    or_,
    select,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.config import Settings
from qeta.domain.error import NotFoundError
from qeta.domain.model import Question
from qeta.domain.repository.question import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    QuestionQuery,
    QuestionRepository,
)
from qeta.domain.value import (
    QuestionId,
    QuestionOrderBy,
    SortDirection,
    TargetType,
    ViewerId,
)
from qeta.persistence.mappers import row_to_question
from qeta.persistence.repository.loaders import (
    fetch_answers,
    fetch_comments,
    fetch_entities,
    fetch_favorited_by,
    fetch_tags,
    fetch_votes,
)
from qeta.persistence.tables import (
    answers_table,
    favorites_table,
    question_entities_table,
    question_tags_table,
    question_votes_table,
    questions_table,
    tags_table,
)

q = questions_table

score_column = (
    select(func.coalesce(func.sum(question_votes_table.c.score), 0))
    .where(question_votes_table.c.question_id == q.c.id)
    .scalar_subquery()
)
answers_count_column = (
    select(func.count())
    .select_from(answers_table)
    .where(answers_table.c.question_id == q.c.id)
    .scalar_subquery()
)
correct_answer_column = exists().where(
    answers_table.c.question_id == q.c.id, answers_table.c.correct
)
favorites_column = (
    select(func.count())
    .select_from(favorites_table)
    .where(favorites_table.c.question_id == q.c.id)
    .scalar_subquery()
)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            settings: Application settings (ranking parameters)
        """
        self.session = session
        self.settings = settings

    def _trend_column(self):
        """Time-decayed popularity: (score + answers + 1) / (age_hours + offset)^gravity."""
        ranking = self.settings.ranking
        age_hours = func.greatest(
            extract("epoch", func.localtimestamp() - q.c.created) / 3600, 0
        )
        return cast(score_column + answers_count_column + 1, Float) / func.power(
            age_hours + ranking.time_offset, ranking.gravity
        )

    def _select(self, with_trend: bool = False) -> Select:
        columns: list[Any] = [
            q,
            score_column.label("score"),
            answers_count_column.label("answers_count"),
            correct_answer_column.label("correct_answer"),
            favorites_column.label("favorites"),
        ]
        if with_trend:
            columns.append(self._trend_column().label("trend"))
        return select(*columns)

    def _filters(self, viewer: ViewerId, query: QuestionQuery) -> list[Any]:
        conditions: list[Any] = []

        if query.author:
            conditions.append(q.c.author == query.author)
        if query.tags:
            conditions.append(
                exists()
                .where(question_tags_table.c.question_id == q.c.id)
                .where(question_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.tag.in_(query.tags))
            )
        if query.entity:
            conditions.append(
                exists().where(
                    question_entities_table.c.question_id == q.c.id,
                    question_entities_table.c.entity_ref == query.entity,
                )
            )
        if query.favorite:
            conditions.append(
                exists().where(
                    favorites_table.c.question_id == q.c.id,
                    favorites_table.c.author == viewer,
                )
            )
        if query.no_answers:
            conditions.append(
                ~exists().where(answers_table.c.question_id == q.c.id)
            )
        if query.no_correct_answer:
            conditions.append(~correct_answer_column)
        if query.no_votes:
            conditions.append(
                ~exists().where(question_votes_table.c.question_id == q.c.id)
            )
        if query.search_query:
            conditions.append(
                or_(
                    q.c.title.icontains(query.search_query, autoescape=True),
                    q.c.content.icontains(query.search_query, autoescape=True),
                )
            )
        return conditions

    def _order_column(self, order_by: QuestionOrderBy):
        if order_by == QuestionOrderBy.VIEWS:
            return q.c.views
        if order_by == QuestionOrderBy.SCORE:
            return score_column
        if order_by == QuestionOrderBy.ANSWERS_COUNT:
            return answers_count_column
        if order_by == QuestionOrderBy.UPDATED:
            return func.coalesce(q.c.updated, q.c.created)
        if order_by == QuestionOrderBy.TREND:
            return self._trend_column()
        return q.c.created

    async def _hydrate(
        self,
        rows: list[dict[str, Any]],
        answers: bool = True,
        comments: bool = True,
        votes: bool = True,
        entities: bool = True,
        favorited_by: bool = True,
    ) -> list[Question]:
        """Attach nested collections to question rows, one query per collection."""
        ids = [row["id"] for row in rows]

        tag_map = await fetch_tags(self.session, ids)
        entity_map = await fetch_entities(self.session, ids) if entities else {}
        comment_map = (
            await fetch_comments(self.session, TargetType.QUESTION, ids)
            if comments
            else {}
        )
        vote_map = (
            await fetch_votes(self.session, TargetType.QUESTION, ids) if votes else {}
        )
        favorite_map = (
            await fetch_favorited_by(self.session, ids) if favorited_by else {}
        )

        answer_map: dict[int, list] = {i: [] for i in ids}
        if answers:
            for answer in await fetch_answers(self.session, question_ids=ids):
                answer_map[answer.question_id].append(answer)

        return [
            row_to_question(
                row,
                tags=tag_map.get(row["id"], []),
                entities=entity_map.get(row["id"], []),
                comments=comment_map.get(row["id"], []),
                votes=vote_map.get(row["id"], []),
                answers=answer_map[row["id"]] if answers else None,
                favorited_by=favorite_map.get(row["id"], []),
            )
            for row in rows
        ]

    async def find_by_id(
        self, question_id: QuestionId, record_view: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, fully hydrated."""
        with logfire.span(
            "question_repository.find_by_id",
            question_id=question_id,
            record_view=record_view,
        ):
            if record_view:
                await self.session.execute(
                    update(q).where(q.c.id == question_id).values(views=q.c.views + 1)
                )

            result = await self.session.execute(
                self._select().where(q.c.id == question_id)
            )
            row = result.fetchone()
            if not row:
                return None

            questions = await self._hydrate([row._asdict()])
            return questions[0]

    async def exists(self, question_id: QuestionId) -> bool:
        result = await self.session.execute(
            select(exists().where(q.c.id == question_id))
        )
        return bool(result.scalar())

    async def find_all(self, viewer: ViewerId, query: QuestionQuery) -> List[Question]:
        """Find questions matching a query."""
        with logfire.span(
            "question_repository.find_all",
            **query.model_dump(mode="json", exclude_defaults=True),
        ):
            stmt = self._select(with_trend=query.include_trend).where(
                *self._filters(viewer, query)
            )

            if query.random:
                stmt = stmt.order_by(func.random()).limit(1)
            else:
                order_column = self._order_column(
                    query.order_by or QuestionOrderBy.CREATED
                )
                if query.order == SortDirection.ASC:
                    stmt = stmt.order_by(order_column.asc(), q.c.id.asc())
                else:
                    stmt = stmt.order_by(order_column.desc(), q.c.id.desc())
                stmt = stmt.limit(
                    DEFAULT_LIMIT if query.limit is None else query.limit
                ).offset(DEFAULT_OFFSET if query.offset is None else query.offset)

            result = await self.session.execute(stmt)
            rows = [row._asdict() for row in result.fetchall()]

            return await self._hydrate(
                rows,
                answers=query.include_answers,
                comments=query.include_comments,
                votes=query.include_votes,
                entities=query.include_entities,
                favorited_by=False,
            )

    async def count(self, viewer: ViewerId, query: QuestionQuery) -> int:
        """Count questions matching a query, ignoring pagination."""
        stmt = select(func.count()).select_from(q).where(*self._filters(viewer, query))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(
        self,
        author: ViewerId,
        title: str,
        content: str,
        tags: list[str],
        entities: list[str],
        created: datetime,
    ) -> Question:
        """Create a question with its tag links and entity refs."""
        with logfire.span("question_repository.create", author=author):
            result = await self.session.execute(
                insert(q)
                .values(author=author, title=title, content=content, created=created)
                .returning(q.c.id)
            )
            question_id = QuestionId(result.scalar_one())

            await self._replace_tags(question_id, tags)
            await self._replace_entities(question_id, entities)
            await self.session.flush()

            question = await self.find_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", question_id)
            return question

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
        """Update a question owned by `author`."""
        with logfire.span("question_repository.update", question_id=question_id):
            result = await self.session.execute(
                update(q)
                .where(q.c.id == question_id, q.c.author == author)
                .values(
                    title=title,
                    content=content,
                    updated=updated,
                    updated_by=author,
                )
                .returning(q.c.id)
            )
            if result.fetchone() is None:
                return None

            if tags is not None:
                await self._replace_tags(question_id, tags)
            if entities is not None:
                await self._replace_entities(question_id, entities)
            await self.session.flush()

            return await self.find_by_id(question_id)

    async def delete(self, question_id: QuestionId, author: Optional[ViewerId]) -> bool:
        """Delete a question; answers, comments, votes and links cascade."""
        stmt = delete(q).where(q.c.id == question_id)
        if author is not None:
            stmt = stmt.where(q.c.author == author)

        result = await self.session.execute(stmt.returning(q.c.id))
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted

    async def _replace_tags(self, question_id: QuestionId, tags: list[str]) -> None:
        await self.session.execute(
            delete(question_tags_table).where(
                question_tags_table.c.question_id == question_id
            )
        )
        if tags:
            await self.session.execute(
                insert(question_tags_table).from_select(
                    ["question_id", "tag_id"],
                    select(literal(question_id), tags_table.c.id).where(
                        tags_table.c.tag.in_(tags)
                    ),
                )
            )

    async def _replace_entities(
        self, question_id: QuestionId, entities: list[str]
    ) -> None:
        await self.session.execute(
            delete(question_entities_table).where(
                question_entities_table.c.question_id == question_id
            )
        )
        if entities:
            await self.session.execute(
                insert(question_entities_table),
                [
                    {"question_id": question_id, "entity_ref": entity}
                    for entity in entities
                ],
            )
