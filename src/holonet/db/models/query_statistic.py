"""Query statistics database model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import CheckConstraint, DateTime, Float, Integer
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from holonet.db.base import Base, UUIDPrimaryKeyMixin


class QueryStatisticModel(Base, UUIDPrimaryKeyMixin):
    """
    Snapshot of the query log aggregates.

    A new row is written on every statistics run; readers take the most
    recent one by ``calculated_at``.
    """

    __tablename__ = "query_statistics"

    total_queries: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_cached_queries: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_duration_ms: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    top_five_queries: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        comment="[{query, count}] ordered by count descending",
    )
    most_popular_hour: Mapped[int | None] = mapped_column(Integer, nullable=True)
    calculated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        CheckConstraint(
            "most_popular_hour IS NULL OR (most_popular_hour >= 0 AND most_popular_hour <= 23)",
            name="valid_hour",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<QueryStatisticModel(id={self.id}, total_queries={self.total_queries}, "
            f"calculated_at={self.calculated_at})>"
        )
