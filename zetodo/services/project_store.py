"""Project Store: project CRUD, default columns, and the current-project pointer.

Invariants:
    - get_all orders by created_at, newest first
    - create generates an id when the caller's is empty, stamps created_at == updated_at,
      and inserts the three default columns in the same operation
    - update never changes id or created_at; zero matched rows is not an error
    - delete relies on ON DELETE CASCADE for columns/cards/activities, then clears the
      current-project pointer if it named the deleted project
    - get_current returns None when no pointer is set

Design Decisions:
    - Each public method is one gateway operation (one lock acquisition)
    - delete commits the project delete before touching settings: statements are
      durable in program order, matching every other non-board cascade
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from zetodo.core.domain_types import (
    DEFAULT_COLUMNS, ProjectId, SettingKey, new_id, utc_now_iso,
)
from zetodo.infrastructure.database import DatabaseSessionManager
from zetodo.models.column import ColumnRecord
from zetodo.models.project import ProjectRecord
from zetodo.models.setting import SettingRecord
from zetodo.schemas.board import Project
from zetodo.services.row_mapping import project_from_record

logger = logging.getLogger(__name__)

_CURRENT_KEY = SettingKey.CURRENT_PROJECT_ID.value


class ProjectStore:
    """Project persistence over the shared store handle."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    def get_all(self) -> list[Project]:
        with self.db.session() as db:
            records = db.scalars(
                select(ProjectRecord).order_by(ProjectRecord.created_at.desc()),
            ).all()
            return [project_from_record(r) for r in records]

    def create(self, project: Project) -> Project:
        now = utc_now_iso()
        stored = project.model_copy(update={
            "id": project.id or new_id(),
            "created_at": now,
            "updated_at": now,
        })
        with self.db.session() as db:
            db.add(ProjectRecord(
                id=stored.id,
                name=stored.name,
                description=stored.description,
                created_at=now,
                updated_at=now,
            ))
            db.flush()
            db.add_all([
                ColumnRecord(
                    id=new_id(),
                    project_id=stored.id,
                    title=default.title,
                    position=default.position,
                    background_color=default.background_color,
                    created_at=now,
                    updated_at=now,
                )
                for default in DEFAULT_COLUMNS
            ])
        logger.info(
            f"Project created: {stored.name}", extra={"project_id": stored.id},
        )
        return stored

    def update(self, project: Project) -> Project:
        now = utc_now_iso()
        with self.db.session() as db:
            result = db.execute(
                update(ProjectRecord)
                .where(ProjectRecord.id == project.id)
                .values(
                    name=project.name,
                    description=project.description,
                    updated_at=now,
                ),
            )
            if result.rowcount == 0:
                logger.warning(
                    f"Update matched no project {project.id}",
                    extra={"project_id": project.id},
                )
        return project.model_copy(update={"updated_at": now})

    def delete(self, project_id: ProjectId) -> None:
        with self.db.session() as db:
            db.execute(delete(ProjectRecord).where(ProjectRecord.id == project_id))
            db.commit()
            if _read_current(db) == project_id:
                db.execute(
                    delete(SettingRecord).where(SettingRecord.key == _CURRENT_KEY),
                )
                logger.info(
                    "Cleared current project pointer",
                    extra={"project_id": project_id},
                )
        logger.info("Project deleted", extra={"project_id": project_id})

    def get_current(self) -> ProjectId | None:
        with self.db.session() as db:
            return _read_current(db)

    def set_current(self, project_id: ProjectId) -> None:
        stmt = sqlite_insert(SettingRecord).values(key=_CURRENT_KEY, value=project_id)
        with self.db.session() as db:
            db.execute(stmt.on_conflict_do_update(
                index_elements=[SettingRecord.key],
                set_={"value": stmt.excluded["value"]},
            ))


def _read_current(db) -> ProjectId | None:
    return db.execute(
        select(SettingRecord.value).where(SettingRecord.key == _CURRENT_KEY),
    ).scalar_one_or_none()
