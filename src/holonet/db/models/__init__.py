"""Database models."""

from .query import QueryModel
from .query_statistic import QueryStatisticModel

__all__ = [
    "QueryModel",
    "QueryStatisticModel",
]
