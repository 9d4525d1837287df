"""Response projections.

Detail reads and mutation results are personalized for the viewer they
run for (`own`, `ownVote`, `favorite`). Listings use the plain summaries
and never carry viewer-relative fields. None of these fields is stored;
they are computed from the entity on every response.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from qeta.domain.model import Answer, Comment, Question, Vote
from qeta.domain.value import ViewerId


class ResponseModel(BaseModel):
    """Base for API payloads, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommentSummary(ResponseModel):
    id: int
    author: str
    content: str
    created: datetime


class AnswerSummary(ResponseModel):
    id: int
    question_id: int
    author: str
    content: str
    correct: bool
    score: int
    created: datetime
    updated: Optional[datetime] = None
    updated_by: Optional[str] = None
    comments: list[CommentSummary] = []


class QuestionSummary(ResponseModel):
    """Question as it appears in listings."""

    id: int
    title: str
    content: str
    author: str
    created: datetime
    updated: Optional[datetime] = None
    updated_by: Optional[str] = None
    tags: list[str] = []
    entities: list[str] = []
    views: int
    score: int
    answers_count: int
    correct_answer: bool
    favorites: int
    trend: Optional[float] = None
    comments: list[CommentSummary] = []
    answers: Optional[list[AnswerSummary]] = None


class CommentView(CommentSummary):
    own: bool = False


class AnswerView(AnswerSummary):
    """Answer personalized for a viewer."""

    comments: list[CommentView] = []
    own: bool = False
    own_vote: Optional[int] = None


class QuestionView(QuestionSummary):
    """Question personalized for a viewer."""

    comments: list[CommentView] = []
    answers: Optional[list[AnswerView]] = None
    own: bool = False
    own_vote: Optional[int] = None
    favorite: bool = False


def own_vote(viewer: ViewerId, votes: list[Vote]) -> Optional[int]:
    """Score of the viewer's vote among `votes`, if any."""
    for vote in votes:
        if vote.voter == viewer:
            return int(vote.score)
    return None


def enrich_comment(viewer: ViewerId, comment: Optional[Comment]) -> Optional[CommentView]:
    if comment is None:
        return None
    return CommentView(
        id=comment.id,
        author=comment.author,
        content=comment.content,
        created=comment.created,
        own=comment.author == viewer,
    )


def enrich_answer(viewer: ViewerId, answer: Optional[Answer]) -> Optional[AnswerView]:
    """Project an answer for a viewer.

    Args:
        viewer: Viewer the response is for
        answer: Answer to project, None passes through

    Returns:
        Answer with `own`, `ownVote` and per-comment `own` set
    """
    if answer is None:
        return None
    return AnswerView(
        id=answer.id,
        question_id=answer.question_id,
        author=answer.author,
        content=answer.content,
        correct=answer.correct,
        score=answer.score,
        created=answer.created,
        updated=answer.updated,
        updated_by=answer.updated_by,
        comments=[enrich_comment(viewer, c) for c in answer.comments],
        own=answer.author == viewer,
        own_vote=own_vote(viewer, answer.votes),
    )


def enrich_question(
    viewer: ViewerId, question: Optional[Question]
) -> Optional[QuestionView]:
    """Project a question for a viewer.

    Each hydrated answer is projected on its own, with its own author and
    vote context.

    Args:
        viewer: Viewer the response is for
        question: Question to project, None passes through

    Returns:
        Question with `own`, `ownVote`, `favorite` and nested projections
    """
    if question is None:
        return None

    answers = None
    if question.answers is not None:
        answers = [enrich_answer(viewer, a) for a in question.answers]

    return QuestionView(
        **_question_fields(question),
        comments=[enrich_comment(viewer, c) for c in question.comments],
        answers=answers,
        own=question.author == viewer,
        own_vote=own_vote(viewer, question.votes),
        favorite=viewer in question.favorited_by,
    )


def summarize_question(question: Question) -> QuestionSummary:
    """Project a question for listings, without viewer-relative fields."""
    answers = None
    if question.answers is not None:
        answers = [
            AnswerSummary(
                id=a.id,
                question_id=a.question_id,
                author=a.author,
                content=a.content,
                correct=a.correct,
                score=a.score,
                created=a.created,
                updated=a.updated,
                updated_by=a.updated_by,
                comments=[_summarize_comment(c) for c in a.comments],
            )
            for a in question.answers
        ]

    return QuestionSummary(
        **_question_fields(question),
        comments=[_summarize_comment(c) for c in question.comments],
        answers=answers,
    )


def _summarize_comment(comment: Comment) -> CommentSummary:
    return CommentSummary(
        id=comment.id,
        author=comment.author,
        content=comment.content,
        created=comment.created,
    )


def _question_fields(question: Question) -> dict:
    return {
        "id": question.id,
        "title": question.title,
        "content": question.content,
        "author": question.author,
        "created": question.created,
        "updated": question.updated,
        "updated_by": question.updated_by,
        "tags": question.tags,
        "entities": question.entities,
        "views": question.views,
        "score": question.score,
        "answers_count": question.answers_count,
        "correct_answer": question.correct_answer,
        "favorites": question.favorites,
        "trend": question.trend,
    }
