"""Batch loaders for the nested collections of questions and answers.

Each loader runs a single query for a batch of parent IDs and returns a
lookup keyed by parent ID.
"""

from collections import defaultdict
from typing import Optional

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from qeta.domain.model import Answer, Comment, Vote
from qeta.domain.value import TargetType
from qeta.persistence.mappers import row_to_answer, row_to_comment, row_to_vote
from qeta.persistence.tables import (
    answer_votes_table,
    answers_table,
    comments_table,
    favorites_table,
    question_entities_table,
    question_tags_table,
    question_votes_table,
    tags_table,
)


async def fetch_tags(session: AsyncSession, question_ids: list[int]) -> dict[int, list[str]]:
    """Fetch tag names for multiple questions in a single query."""
    if not question_ids:
        return {}

    stmt = (
        select(question_tags_table.c.question_id, tags_table.c.tag)
        .select_from(question_tags_table)
        .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
        .where(question_tags_table.c.question_id.in_(question_ids))
        .order_by(tags_table.c.tag)
    )
    result = await session.execute(stmt)

    tag_map: dict[int, list[str]] = defaultdict(list)
    for row in result.fetchall():
        tag_map[row.question_id].append(row.tag)
    return tag_map


async def fetch_entities(
    session: AsyncSession, question_ids: list[int]
) -> dict[int, list[str]]:
    """Fetch entity refs for multiple questions in a single query."""
    if not question_ids:
        return {}

    stmt = (
        select(question_entities_table)
        .where(question_entities_table.c.question_id.in_(question_ids))
        .order_by(question_entities_table.c.entity_ref)
    )
    result = await session.execute(stmt)

    entity_map: dict[int, list[str]] = defaultdict(list)
    for row in result.fetchall():
        entity_map[row.question_id].append(row.entity_ref)
    return entity_map


async def fetch_comments(
    session: AsyncSession, target_type: TargetType, target_ids: list[int]
) -> dict[int, list[Comment]]:
    """Fetch comments of multiple questions or answers, oldest first."""
    if not target_ids:
        return {}

    key = _comment_parent_column(target_type)
    stmt = (
        select(comments_table)
        .where(key.in_(target_ids))
        .order_by(comments_table.c.created, comments_table.c.id)
    )
    result = await session.execute(stmt)

    comment_map: dict[int, list[Comment]] = defaultdict(list)
    for row in result.fetchall():
        comment = row_to_comment(row._asdict())
        comment_map[comment.target_id].append(comment)
    return comment_map


async def fetch_votes(
    session: AsyncSession, target_type: TargetType, target_ids: list[int]
) -> dict[int, list[Vote]]:
    """Fetch votes of multiple questions or answers."""
    if not target_ids:
        return {}

    table, key = _votes_table(target_type)
    stmt = select(table).where(key.in_(target_ids))
    result = await session.execute(stmt)

    vote_map: dict[int, list[Vote]] = defaultdict(list)
    for row in result.fetchall():
        vote = row_to_vote(row._asdict(), target_type)
        vote_map[vote.target_id].append(vote)
    return vote_map


async def fetch_favorited_by(
    session: AsyncSession, question_ids: list[int]
) -> dict[int, list[str]]:
    """Fetch the viewers that favorited each question."""
    if not question_ids:
        return {}

    stmt = (
        select(favorites_table.c.question_id, favorites_table.c.author)
        .where(favorites_table.c.question_id.in_(question_ids))
        .order_by(favorites_table.c.author)
    )
    result = await session.execute(stmt)

    favorite_map: dict[int, list[str]] = defaultdict(list)
    for row in result.fetchall():
        favorite_map[row.question_id].append(row.author)
    return favorite_map


async def fetch_answers(
    session: AsyncSession,
    question_ids: Optional[list[int]] = None,
    answer_ids: Optional[list[int]] = None,
) -> list[Answer]:
    """Fetch answers with their comments, votes and score.

    Args:
        session: Database session
        question_ids: Load every answer of these questions
        answer_ids: Load these answers

    Returns:
        Answers, oldest first
    """
    stmt = select(answers_table).order_by(answers_table.c.created, answers_table.c.id)
    if question_ids is not None:
        stmt = stmt.where(answers_table.c.question_id.in_(question_ids))
    if answer_ids is not None:
        stmt = stmt.where(answers_table.c.id.in_(answer_ids))

    result = await session.execute(stmt)
    rows = [row._asdict() for row in result.fetchall()]
    ids = [row["id"] for row in rows]

    comments = await fetch_comments(session, TargetType.ANSWER, ids)
    votes = await fetch_votes(session, TargetType.ANSWER, ids)

    return [
        row_to_answer(
            row,
            comments=comments.get(row["id"], []),
            votes=votes.get(row["id"], []),
            score=sum(int(v.score) for v in votes.get(row["id"], [])),
        )
        for row in rows
    ]


def _comment_parent_column(target_type: TargetType) -> ColumnElement:
    if target_type == TargetType.QUESTION:
        return comments_table.c.question_id
    return comments_table.c.answer_id


def _votes_table(target_type: TargetType):
    if target_type == TargetType.QUESTION:
        return question_votes_table, question_votes_table.c.question_id
    return answer_votes_table, answer_votes_table.c.answer_id
