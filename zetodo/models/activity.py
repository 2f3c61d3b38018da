"""Activity ORM: auxiliary board activity log.

Invariants:
    - project_id references projects.id, ON DELETE CASCADE

Design Decisions:
    - Created by migration v1 and mapped for schema completeness only; no store
      operation reads or writes it (audit queries are out of scope)
"""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zetodo.db.base import Base


class ActivityRecord(Base):
    """Activity log entry."""
    __tablename__ = "activities"
    __table_args__ = (Index("idx_activities_project_id", "project_id"),)

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        Text, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    type: Mapped[str] = mapped_column(Text, nullable=False)
    card_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    column_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    from_column_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    to_column_id: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    timestamp: Mapped[str] = mapped_column(String, nullable=False)
