"""Tag use cases."""

from .list_tags import ListTagsUseCase

__all__ = [
    "ListTagsUseCase",
]
