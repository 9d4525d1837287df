"""Favorite use cases."""

from .favorite import FavoriteRequest, FavoriteUseCase

__all__ = [
    "FavoriteRequest",
    "FavoriteUseCase",
]
