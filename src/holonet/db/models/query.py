"""Query log database model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from holonet.core.models import QueryLogEvent
from holonet.db.base import Base, UUIDPrimaryKeyMixin


class QueryModel(Base, UUIDPrimaryKeyMixin):
    """One search served by the resolver, as recorded by the query log."""

    __tablename__ = "queries"

    query_string: Mapped[str] = mapped_column(String(500), nullable=False)
    resource_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Kind as given by the caller",
    )
    served_from_cache: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
    )
    duration_ms: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        server_default=func.now(),
        index=True,
    )

    __table_args__ = (
        CheckConstraint("duration_ms >= 0", name="valid_duration"),
        Index("ix_queries_query_string", "query_string"),
    )

    @classmethod
    def from_event(cls, event: QueryLogEvent) -> QueryModel:
        return cls(
            query_string=event.query_string,
            resource_type=event.resource_kind,
            served_from_cache=event.served_from_cache,
            duration_ms=event.duration_ms,
            created_at=event.timestamp,
        )

    def __repr__(self) -> str:
        return (
            f"<QueryModel(id={self.id}, query_string='{self.query_string}', "
            f"served_from_cache={self.served_from_cache})>"
        )
