"""Column ORM: one board column, owned by exactly one project.

Invariants:
    - project_id references projects.id, ON DELETE CASCADE
    - position is caller-assigned; not unique, never renumbered by the store
"""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zetodo.db.base import Base


class ColumnRecord(Base):
    """Column row."""
    __tablename__ = "columns"
    __table_args__ = (Index("idx_columns_project_id", "project_id"),)

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        Text, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    background_color: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[str] = mapped_column(String, nullable=False)
    updated_at: Mapped[str] = mapped_column(String, nullable=False)
