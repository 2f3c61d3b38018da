"""Board Schemas: Pydantic wire models for projects, columns, cards and the board.

Invariants:
    - Wire names are camelCase (columnId, cardIds, createdAt ...); snake_case accepted on input
    - id may be empty on create; the store generates one
    - Card.completed is tri-state: None (never set), True, False
    - Column.card_ids is derived at read time, never persisted

Design Decisions:
    - One schema per entity, reused for request and response bodies
    - Priority as a str Enum from core/domain_types: unknown values fail validation
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from zetodo.core.domain_types import Priority


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class Project(_WireModel):
    """Project: the owner of one board."""
    id: str = ""
    name: str = Field(min_length=1, max_length=500)
    description: str | None = None
    created_at: str = ""
    updated_at: str = ""


class Column(_WireModel):
    """Board column; display order is position ascending."""
    id: str = ""
    project_id: str | None = None
    title: str
    position: int = 0
    card_ids: list[str] = Field(default_factory=list)
    background_color: str | None = None
    created_at: str = ""
    updated_at: str = ""


class Card(_WireModel):
    """Card inside a column."""
    id: str = ""
    project_id: str | None = None
    column_id: str
    title: str
    description: str | None = None
    position: int = 0
    completed: bool | None = None
    priority: Priority = Priority.LOW
    start_date: str | None = None
    due_date: str | None = None
    created_at: str = ""
    updated_at: str = ""


class Board(_WireModel):
    """Read-model aggregate of one project's columns and cards."""
    id: str
    title: str = ""
    columns: list[Column] = Field(default_factory=list)
    cards: list[Card] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""


class MoveCardParams(_WireModel):
    """Move request. from_column_id is informational; the card is found by id."""
    card_id: str
    from_column_id: str
    to_column_id: str
    new_position: int


class CurrentProject(_WireModel):
    """Current-project pointer; None when unset."""
    project_id: str | None = None
