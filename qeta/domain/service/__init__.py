"""Domain services."""

from .answer_service import AnswerService
from .comment_service import CommentService
from .favorite_service import FavoriteService
from .identity_service import IdentityService
from .permission_service import (
    AllowAllPermissionGate,
    PermissionGate,
    PolicyPermissionGate,
)
from .question_service import QuestionService
from .tag_service import TagService
from .view_translator import NAMED_VIEWS, ViewTranslator
from .vote_service import VoteService

__all__ = [
    "AllowAllPermissionGate",
    "AnswerService",
    "CommentService",
    "FavoriteService",
    "IdentityService",
    "NAMED_VIEWS",
    "PermissionGate",
    "PolicyPermissionGate",
    "QuestionService",
    "TagService",
    "ViewTranslator",
    "VoteService",
]
