"""Answer use cases."""

from .create_answer import CreateAnswerRequest, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .get_answer import GetAnswerRequest, GetAnswerUseCase
from .mark_answer import MarkAnswerRequest, MarkAnswerUseCase
from .update_answer import UpdateAnswerRequest, UpdateAnswerUseCase

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "GetAnswerRequest",
    "GetAnswerUseCase",
    "MarkAnswerRequest",
    "MarkAnswerUseCase",
    "UpdateAnswerRequest",
    "UpdateAnswerUseCase",
]
