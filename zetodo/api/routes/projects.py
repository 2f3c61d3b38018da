"""Project Routes: project CRUD and the current-project pointer.

Invariants:
    - /current routes are registered before /{project_id} so the literal path wins
    - The path id overrides any id in an update body
    - Routes hold no logic beyond argument plumbing; ProjectStore does the work

Design Decisions:
    - Plain `def` handlers: FastAPI runs them in its threadpool, so blocking store calls
      never suspend an event loop while the gateway lock is held
"""

from fastapi import APIRouter, Depends, status

from zetodo.api.dependencies import get_project_store
from zetodo.core.errors import SerializationError
from zetodo.schemas.board import CurrentProject, Project
from zetodo.services.project_store import ProjectStore

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("", response_model=list[Project])
def get_projects(store: ProjectStore = Depends(get_project_store)):
    """All projects, newest first."""
    return store.get_all()


@router.post(
    "", response_model=Project, status_code=status.HTTP_201_CREATED,
)
def create_project(
    body: Project, store: ProjectStore = Depends(get_project_store),
):
    """Create a project with its three default columns."""
    return store.create(body)


@router.get("/current", response_model=CurrentProject)
def get_current_project(store: ProjectStore = Depends(get_project_store)):
    return CurrentProject(project_id=store.get_current())


@router.put("/current", status_code=status.HTTP_204_NO_CONTENT)
def set_current_project(
    body: CurrentProject, store: ProjectStore = Depends(get_project_store),
):
    if not body.project_id:
        raise SerializationError("projectId is required")
    store.set_current(body.project_id)


@router.put("/{project_id}", response_model=Project)
def update_project(
    project_id: str,
    body: Project,
    store: ProjectStore = Depends(get_project_store),
):
    return store.update(body.model_copy(update={"id": project_id}))


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: str, store: ProjectStore = Depends(get_project_store),
):
    """Delete the project; columns and cards cascade."""
    store.delete(project_id)
