"""Initial schema: projects, columns, cards, activities, settings.

Version: 1

Every project-scoped table cascades on project delete; cards also cascade on
column delete. Foreign-key columns are indexed for board scans.
"""

import sqlalchemy as sa
from alembic.operations import Operations

version = 1
description = "projects, columns, cards, activities, settings"


def upgrade(op: Operations) -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
    )

    op.create_table(
        "columns",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column(
            "project_id", sa.Text,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("background_color", sa.Text, nullable=True),
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
    )

    op.create_table(
        "cards",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column(
            "project_id", sa.Text,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "column_id", sa.Text,
            sa.ForeignKey("columns.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("completed", sa.Integer, nullable=True, server_default="0"),
        sa.Column("created_at", sa.Text, nullable=False),
        sa.Column("updated_at", sa.Text, nullable=False),
    )

    op.create_table(
        "activities",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column(
            "project_id", sa.Text,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("type", sa.Text, nullable=False),
        sa.Column("card_id", sa.Text, nullable=True),
        sa.Column("column_id", sa.Text, nullable=True),
        sa.Column("from_column_id", sa.Text, nullable=True),
        sa.Column("to_column_id", sa.Text, nullable=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("timestamp", sa.Text, nullable=False),
    )

    op.create_table(
        "settings",
        sa.Column("key", sa.Text, primary_key=True),
        sa.Column("value", sa.Text, nullable=False),
    )

    op.create_index("idx_cards_project_id", "cards", ["project_id"])
    op.create_index("idx_cards_column_id", "cards", ["column_id"])
    op.create_index("idx_columns_project_id", "columns", ["project_id"])
    op.create_index("idx_activities_project_id", "activities", ["project_id"])
