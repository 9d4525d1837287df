"""Domain value types for the Q&A domain."""

from enum import Enum, IntEnum


class TargetType(str, Enum):
    """Type of entity that can be voted on or commented."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteScore(IntEnum):
    """Score carried by a single vote."""

    UP = 1
    DOWN = -1


class Permission(str, Enum):
    """Action tags evaluated by the permission gate."""

    READ = "qeta.read"
    CREATE_QUESTION = "qeta.create.question"
    CREATE_ANSWER = "qeta.create.answer"


class QuestionOrderBy(str, Enum):
    """Sort key for question listings."""

    VIEWS = "views"
    SCORE = "score"
    ANSWERS_COUNT = "answersCount"
    CREATED = "created"
    UPDATED = "updated"
    TREND = "trend"


class SortDirection(str, Enum):
    """Sort direction for question listings."""

    ASC = "asc"
    DESC = "desc"
