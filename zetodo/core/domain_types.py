"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ProjectId, ColumnId, CardId wrap opaque strings (UUID4 text when generated)
    - Timestamps are ISO-8601 strings with a UTC offset
    - Priority values match what the board UI renders

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple, NewType


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", str)
ColumnId = NewType("ColumnId", str)
CardId = NewType("CardId", str)


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ─── Enums ───────────────────────────────────────────────────────

class Priority(str, Enum):
    """Card priority, lowest first."""
    LOW = "low"
    NORMAL = "normal"
    URGENT = "urgent"
    CRITICAL = "critical"


class SettingKey(str, Enum):
    """Keys of the single-row-per-key settings table."""
    CURRENT_PROJECT_ID = "current_project_id"


# ─── Defaults ────────────────────────────────────────────────────

class DefaultColumn(NamedTuple):
    title: str
    position: int
    background_color: str


DEFAULT_COLUMNS: tuple[DefaultColumn, ...] = (
    DefaultColumn("待办", 0, "#f8fafc"),
    DefaultColumn("进行中", 1, "#eff6ff"),
    DefaultColumn("已完成", 2, "#f0fdf4"),
)

BOARD_TITLE = "看板"
