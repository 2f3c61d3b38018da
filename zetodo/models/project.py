"""Project ORM: the owner of one board's columns and cards.

Invariants:
    - id is an opaque text primary key (UUID4 text when generated by the store)
    - Timestamps are ISO-8601 text, stamped by the store, never by the database

Design Decisions:
    - Deleting a project relies on ON DELETE CASCADE in columns/cards/activities
      (PRAGMA foreign_keys is enabled on every connection)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zetodo.db.base import Base


class ProjectRecord(Base):
    """Project row."""
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[str] = mapped_column(String, nullable=False)
    updated_at: Mapped[str] = mapped_column(String, nullable=False)
