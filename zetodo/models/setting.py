"""Setting ORM: process-wide key/value settings (e.g. current project pointer)."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from zetodo.db.base import Base


class SettingRecord(Base):
    """One setting; at most one row per key."""
    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
