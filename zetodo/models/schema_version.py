"""SchemaVersion ORM: one row per applied migration step."""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from zetodo.db.base import Base


class SchemaVersionRecord(Base):
    """Applied migration version; current schema = MAX(version)."""
    __tablename__ = "schema_version"

    version: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
