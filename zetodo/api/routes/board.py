"""Board Routes: whole-board read/replace and card/column mutators for one project.

Invariants:
    - Every route is scoped under /api/v1/projects/{project_id}
    - The path id overrides any id in an update body
    - /cards/move is a literal path, distinct from /cards/{card_id}
"""

from fastapi import APIRouter, Depends, status

from zetodo.api.dependencies import get_board_store
from zetodo.schemas.board import Board, Card, Column, MoveCardParams
from zetodo.services.board_store import BoardStore

router = APIRouter(prefix="/api/v1/projects/{project_id}", tags=["board"])


@router.get("/board", response_model=Board)
def get_board(project_id: str, store: BoardStore = Depends(get_board_store)):
    return store.get_board(project_id)


@router.put("/board", status_code=status.HTTP_204_NO_CONTENT)
def save_board(
    project_id: str, body: Board, store: BoardStore = Depends(get_board_store),
):
    """Replace all columns and cards of the project, atomically."""
    store.save_board(project_id, body)


# ─── Cards ────────────────────────────────────────────────────────

@router.post(
    "/cards", response_model=Card, status_code=status.HTTP_201_CREATED,
)
def create_card(
    project_id: str, body: Card, store: BoardStore = Depends(get_board_store),
):
    return store.create_card(project_id, body)


@router.post("/cards/move", status_code=status.HTTP_204_NO_CONTENT)
def move_card(
    project_id: str,
    body: MoveCardParams,
    store: BoardStore = Depends(get_board_store),
):
    store.move_card(body)


@router.put("/cards/{card_id}", response_model=Card)
def update_card(
    project_id: str,
    card_id: str,
    body: Card,
    store: BoardStore = Depends(get_board_store),
):
    return store.update_card(body.model_copy(update={"id": card_id}))


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(
    project_id: str, card_id: str, store: BoardStore = Depends(get_board_store),
):
    store.delete_card(card_id)


# ─── Columns ──────────────────────────────────────────────────────

@router.post(
    "/columns", response_model=Column, status_code=status.HTTP_201_CREATED,
)
def create_column(
    project_id: str, body: Column, store: BoardStore = Depends(get_board_store),
):
    return store.create_column(project_id, body)


@router.put("/columns/{column_id}", response_model=Column)
def update_column(
    project_id: str,
    column_id: str,
    body: Column,
    store: BoardStore = Depends(get_board_store),
):
    return store.update_column(body.model_copy(update={"id": column_id}))


@router.delete("/columns/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    project_id: str,
    column_id: str,
    store: BoardStore = Depends(get_board_store),
):
    """Delete the column's cards, then the column."""
    store.delete_column(column_id)
