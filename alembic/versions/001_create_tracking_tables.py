"""create visitors, page_views and votes tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ROUTES = ("HOME", "CONTACT", "IMPRINT", "ROOM", "ANALYTICS", "ROADMAP", "GUIDE", "AIMS")


def upgrade() -> None:
    # --- visitors ---
    op.create_table(
        "visitors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("browser", sa.Text(), nullable=True),
        sa.Column("device", sa.Text(), nullable=True),
        sa.Column("os", sa.Text(), nullable=True),
        sa.Column("city", sa.Text(), nullable=True),
        sa.Column("country", sa.Text(), nullable=True),
        sa.Column("region", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_visitors"),
    )

    # --- page_views ---
    op.create_table(
        "page_views",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("visitor_id", sa.Uuid(), nullable=False),
        sa.Column("route", sa.Text(), nullable=False),
        sa.Column("room", sa.Text(), nullable=True),
        sa.Column(
            "viewed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_page_views"),
        sa.ForeignKeyConstraint(
            ["visitor_id"], ["visitors.id"], name="fk_page_views_visitor_id_visitors"
        ),
        sa.CheckConstraint(
            "route IN (" + ", ".join(f"'{r}'" for r in ROUTES) + ")",
            name="ck_page_views_route",
        ),
    )
    op.create_index("ix_page_views_visitor_id", "page_views", ["visitor_id"])
    op.create_index("ix_page_views_viewed_at", "page_views", ["viewed_at"])

    # --- votes (written by the voting service) ---
    op.create_table(
        "votes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("room", sa.Text(), nullable=False),
        sa.Column("avg_estimation", sa.Float(), nullable=False),
        sa.Column("min_estimation", sa.Float(), nullable=False),
        sa.Column("max_estimation", sa.Float(), nullable=False),
        sa.Column("amount_of_estimations", sa.Integer(), nullable=False),
        sa.Column("amount_of_spectators", sa.Integer(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_votes"),
    )
    op.create_index("ix_votes_created_at", "votes", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_votes_created_at", table_name="votes")
    op.drop_table("votes")
    op.drop_index("ix_page_views_viewed_at", table_name="page_views")
    op.drop_index("ix_page_views_visitor_id", table_name="page_views")
    op.drop_table("page_views")
    op.drop_table("visitors")
