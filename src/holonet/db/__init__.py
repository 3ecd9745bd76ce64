"""Database layer for the query log."""

from .base import Base, UUIDPrimaryKeyMixin, create_engine, create_session_factory
from .models import QueryModel, QueryStatisticModel
from .repositories import BaseRepository, QueryRepository, QueryStatisticRepository
from .session import DatabaseManager, session_scope

__all__ = [
    # Base
    "Base",
    "UUIDPrimaryKeyMixin",
    "create_engine",
    "create_session_factory",
    # Models
    "QueryModel",
    "QueryStatisticModel",
    # Repositories
    "BaseRepository",
    "QueryRepository",
    "QueryStatisticRepository",
    # Session
    "DatabaseManager",
    "session_scope",
]
