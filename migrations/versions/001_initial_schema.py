"""Initial schema for holonet.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create queries table (one row per search)
    op.create_table(
        "queries",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("query_string", sa.String(500), nullable=False),
        sa.Column(
            "resource_type",
            sa.String(50),
            nullable=False,
            comment="Kind as given by the caller",
        ),
        sa.Column(
            "served_from_cache",
            sa.Boolean,
            server_default="false",
            nullable=False,
        ),
        sa.Column("duration_ms", sa.Integer, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("duration_ms >= 0", name="ck_queries_valid_duration"),
    )
    op.create_index("ix_queries_query_string", "queries", ["query_string"])
    op.create_index("ix_queries_created_at", "queries", ["created_at"])

    # Create query_statistics table (append-only snapshots)
    op.create_table(
        "query_statistics",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("total_queries", sa.Integer, nullable=False),
        sa.Column("total_cached_queries", sa.Integer, nullable=False),
        sa.Column("average_duration_ms", sa.Float, nullable=False),
        sa.Column(
            "top_five_queries",
            postgresql.JSONB,
            server_default="[]",
            nullable=False,
            comment="[{query, count}] ordered by count descending",
        ),
        sa.Column("most_popular_hour", sa.Integer, nullable=True),
        sa.Column("calculated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "most_popular_hour IS NULL OR (most_popular_hour >= 0 AND most_popular_hour <= 23)",
            name="ck_query_statistics_valid_hour",
        ),
    )
    op.create_index(
        "ix_query_statistics_calculated_at", "query_statistics", ["calculated_at"]
    )


def downgrade() -> None:
    op.drop_table("query_statistics")
    op.drop_table("queries")
