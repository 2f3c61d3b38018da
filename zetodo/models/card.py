"""Card ORM: one task card inside a column.

Invariants:
    - project_id references projects.id and column_id references columns.id, both ON DELETE CASCADE
    - completed is stored as 1/0/NULL (tri-state)
    - priority/start_date/due_date arrive with schema v2; priority defaults to 'low'

Design Decisions:
    - project_id denormalized: board reads and full-replace deletes scan one index,
      no join through columns
"""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zetodo.db.base import Base


class CardRecord(Base):
    """Card row."""
    __tablename__ = "cards"
    __table_args__ = (
        Index("idx_cards_project_id", "project_id"),
        Index("idx_cards_column_id", "column_id"),
    )

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        Text, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    column_id: Mapped[str] = mapped_column(
        Text, ForeignKey("columns.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    # no Python default: an explicit None must reach the row as NULL
    completed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    priority: Mapped[str | None] = mapped_column(
        Text, nullable=True, default="low",
    )
    start_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[str] = mapped_column(String, nullable=False)
    updated_at: Mapped[str] = mapped_column(String, nullable=False)
