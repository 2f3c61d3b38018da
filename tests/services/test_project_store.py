"""Project Store: verifies project CRUD, default columns, cascades and the current pointer.

Tests:
    - create assigns an id, stamps created_at == updated_at, adds 3 default columns
    - get_all orders newest first
    - update rewrites name/description and updated_at only
    - delete cascades to every column and card of the project
    - current pointer: unset -> None, set/overwrite, cleared when its project is deleted
"""

from sqlalchemy import func, select

from zetodo.models.activity import ActivityRecord
from zetodo.models.card import CardRecord
from zetodo.models.column import ColumnRecord
from zetodo.models.project import ProjectRecord
from zetodo.schemas.board import Card, Column, Project


def _count(db_manager, model, project_id) -> int:
    return db_manager.with_connection(lambda db: db.execute(
        select(func.count()).select_from(model).where(model.project_id == project_id),
    ).scalar_one())


def test_create_assigns_id_and_timestamps(project_store):
    created = project_store.create(Project(name="X", description="d"))
    assert created.id
    assert created.name == "X"
    assert created.description == "d"
    assert created.created_at == created.updated_at != ""


def test_create_keeps_caller_id(project_store):
    created = project_store.create(Project(id="fixed-id", name="X"))
    assert created.id == "fixed-id"
    assert [p.id for p in project_store.get_all()] == ["fixed-id"]


def test_create_adds_default_columns(project_store, board_store):
    created = project_store.create(Project(name="X"))
    columns = board_store.get_board(created.id).columns
    assert [(c.title, c.position) for c in columns] == [
        ("待办", 0), ("进行中", 1), ("已完成", 2),
    ]
    assert [c.background_color for c in columns] == ["#f8fafc", "#eff6ff", "#f0fdf4"]
    assert len({c.id for c in columns}) == 3
    assert all(c.created_at == created.created_at for c in columns)


def test_get_all_newest_first(project_store):
    first = project_store.create(Project(name="first"))
    second = project_store.create(Project(name="second"))
    assert [p.id for p in project_store.get_all()] == [second.id, first.id]


def test_get_all_empty(project_store):
    assert project_store.get_all() == []


def test_update_rewrites_mutable_fields(project_store, seed_project):
    edited = seed_project.model_copy(update={
        "name": "Renamed", "description": "new", "created_at": "ignored",
    })
    updated = project_store.update(edited)

    assert updated.name == "Renamed"
    assert updated.updated_at != seed_project.updated_at
    stored = project_store.get_all()[0]
    assert stored.name == "Renamed"
    assert stored.description == "new"
    assert stored.created_at == seed_project.created_at
    assert stored.updated_at == updated.updated_at


def test_update_missing_project_is_silent(project_store):
    result = project_store.update(Project(id="missing", name="Ghost"))
    assert result.id == "missing"
    assert project_store.get_all() == []


def test_delete_cascades_columns_and_cards(
    db_manager, project_store, board_store, seed_project,
):
    pid = seed_project.id
    column = board_store.create_column(pid, Column(title="Extra", position=3))
    for i in range(4):
        board_store.create_card(pid, Card(column_id=column.id, title=f"c{i}", position=i))
    assert _count(db_manager, ColumnRecord, pid) == 4
    assert _count(db_manager, CardRecord, pid) == 4

    project_store.delete(pid)

    assert _count(db_manager, ColumnRecord, pid) == 0
    assert _count(db_manager, CardRecord, pid) == 0
    assert db_manager.with_connection(
        lambda db: db.get(ProjectRecord, pid),
    ) is None


def test_delete_cascades_activities(db_manager, project_store, seed_project):
    pid = seed_project.id

    def log_activity(db):
        db.add(ActivityRecord(
            id="a1", project_id=pid, type="card_created", title="c0",
            timestamp=seed_project.created_at,
        ))

    db_manager.with_connection(log_activity)
    assert _count(db_manager, ActivityRecord, pid) == 1

    project_store.delete(pid)

    assert _count(db_manager, ActivityRecord, pid) == 0


def test_delete_leaves_other_projects(project_store, board_store, seed_project):
    other = project_store.create(Project(name="Other"))
    project_store.delete(seed_project.id)
    assert [p.id for p in project_store.get_all()] == [other.id]
    assert len(board_store.get_board(other.id).columns) == 3


def test_current_project_unset(project_store):
    assert project_store.get_current() is None


def test_set_and_overwrite_current(project_store, seed_project):
    other = project_store.create(Project(name="Other"))
    project_store.set_current(seed_project.id)
    assert project_store.get_current() == seed_project.id
    project_store.set_current(other.id)
    assert project_store.get_current() == other.id


def test_delete_current_project_clears_pointer(project_store, seed_project):
    project_store.set_current(seed_project.id)
    project_store.delete(seed_project.id)
    assert project_store.get_current() is None


def test_delete_other_project_keeps_pointer(project_store, seed_project):
    other = project_store.create(Project(name="Other"))
    project_store.set_current(seed_project.id)
    project_store.delete(other.id)
    assert project_store.get_current() == seed_project.id
