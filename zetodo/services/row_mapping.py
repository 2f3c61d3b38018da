"""Row Mapping: converts between ORM records and wire schemas.

Invariants:
    - Card.completed: True -> 1, False -> 0, None -> NULL, and back
    - Card.priority outside the enum reads back as LOW (logged), never as an error
    - project_id on a record always comes from the owning scope, never from the payload
    - Column.card_ids is never read from or written to a record
"""

import logging

from zetodo.core.domain_types import Priority
from zetodo.models.card import CardRecord
from zetodo.models.column import ColumnRecord
from zetodo.models.project import ProjectRecord
from zetodo.schemas.board import Card, Column, Project

logger = logging.getLogger(__name__)


def _completed_to_db(completed: bool | None) -> int | None:
    if completed is None:
        return None
    return 1 if completed else 0


def _completed_from_db(value: int | None) -> bool | None:
    if value is None:
        return None
    return value == 1


def _priority_from_db(record: CardRecord) -> Priority:
    """Unknown or missing values read as LOW so one odd row cannot break a board."""
    try:
        return Priority(record.priority or Priority.LOW)
    except ValueError:
        logger.warning(
            f"Unknown priority {record.priority!r}, reading as low",
            extra={"card_id": record.id},
        )
        return Priority.LOW


def project_from_record(record: ProjectRecord) -> Project:
    return Project(
        id=record.id,
        name=record.name,
        description=record.description,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def column_from_record(record: ColumnRecord) -> Column:
    return Column(
        id=record.id,
        project_id=record.project_id,
        title=record.title,
        position=record.position,
        background_color=record.background_color,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def column_values(column: Column, project_id: str) -> dict:
    return {
        "id": column.id,
        "project_id": project_id,
        "title": column.title,
        "position": column.position,
        "background_color": column.background_color,
        "created_at": column.created_at,
        "updated_at": column.updated_at,
    }


def card_from_record(record: CardRecord) -> Card:
    return Card(
        id=record.id,
        project_id=record.project_id,
        column_id=record.column_id,
        title=record.title,
        description=record.description,
        position=record.position,
        completed=_completed_from_db(record.completed),
        priority=_priority_from_db(record),
        start_date=record.start_date,
        due_date=record.due_date,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def card_values(card: Card, project_id: str) -> dict:
    return {
        "id": card.id,
        "project_id": project_id,
        "column_id": card.column_id,
        "title": card.title,
        "description": card.description,
        "position": card.position,
        "completed": _completed_to_db(card.completed),
        "priority": Priority(card.priority).value,
        "start_date": card.start_date,
        "due_date": card.due_date,
        "created_at": card.created_at,
        "updated_at": card.updated_at,
    }


def card_mutable_values(card: Card) -> dict:
    """Fields an update may change (everything but id, project_id, created_at)."""
    values = card_values(card, project_id="")
    for key in ("id", "project_id", "created_at"):
        values.pop(key)
    return values
