"""Repository implementations."""

from .base import BaseRepository
from .query import QueryRepository, QueryStatisticRepository

__all__ = ["BaseRepository", "QueryRepository", "QueryStatisticRepository"]
