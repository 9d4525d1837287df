"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional

from qeta.domain.model import Answer, Comment, Question, Tag, Vote
from qeta.domain.value import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    TargetType,
    ViewerId,
    VoteScore,
)


def row_to_question(
    row: Dict[str, Any],
    tags: Optional[list[str]] = None,
    entities: Optional[list[str]] = None,
    **nested: Any,
) -> Question:
    """Convert database row to Question domain model.

    Aggregate columns (`score`, `answers_count`, `correct_answer`,
    `favorites`, `trend`) are read when the query selected them.

    Args:
        row: Database row as dict
        tags: Tag names of the question
        entities: Entity refs of the question
        **nested: Hydrated collections (comments, votes, answers, favorited_by)

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(row["id"]),
        title=row["title"],
        content=row["content"],
        author=ViewerId(row["author"]),
        created=row["created"],
        updated=row.get("updated"),
        updated_by=row.get("updated_by"),
        views=row["views"],
        score=row.get("score") or 0,
        answers_count=row.get("answers_count") or 0,
        correct_answer=bool(row.get("correct_answer")),
        favorites=row.get("favorites") or 0,
        trend=row.get("trend"),
        tags=tags or [],
        entities=entities or [],
        **nested,
    )


def row_to_answer(row: Dict[str, Any], **nested: Any) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict
        **nested: Hydrated collections (comments, votes) and `score`

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(row["id"]),
        question_id=QuestionId(row["question_id"]),
        author=ViewerId(row["author"]),
        content=row["content"],
        correct=row["correct"],
        created=row["created"],
        updated=row.get("updated"),
        updated_by=row.get("updated_by"),
        **nested,
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The parent is whichever of `question_id`/`answer_id` is set.
    """
    if row.get("answer_id") is not None:
        target_type, target_id = TargetType.ANSWER, row["answer_id"]
    else:
        target_type, target_id = TargetType.QUESTION, row["question_id"]

    return Comment(
        id=CommentId(row["id"]),
        target_type=target_type,
        target_id=target_id,
        author=ViewerId(row["author"]),
        content=row["content"],
        created=row["created"],
    )


def row_to_vote(row: Dict[str, Any], target_type: TargetType) -> Vote:
    """Convert a question_votes or answer_votes row to Vote domain model."""
    key = "question_id" if target_type == TargetType.QUESTION else "answer_id"
    return Vote(
        voter=ViewerId(row["author"]),
        target_type=target_type,
        target_id=row[key],
        score=VoteScore(row["score"]),
        created=row["created"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to a dict for its votes table."""
    key = "question_id" if vote.target_type == TargetType.QUESTION else "answer_id"
    return {
        "author": vote.voter,
        key: vote.target_id,
        "score": int(vote.score),
        "created": vote.created,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(id=TagId(row["id"]), tag=row["tag"])
