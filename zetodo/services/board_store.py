"""Board Store: full-board reads/writes and fine-grained card/column mutators.

Invariants:
    - get_board is a pure read: two ordered queries, then the in-memory projection
    - save_board replaces a project's columns and cards all-or-nothing: delete cards,
      delete columns, insert columns, insert cards, commit; any failure leaves the
      previous rows untouched
    - save_board stores ids and timestamps exactly as supplied
    - create_* generate an id when the caller's is empty and stamp created_at == updated_at
    - update_* stamp updated_at and echo the caller's created_at (no re-read)
    - delete_column removes the column's cards first, then the column (application-level
      cascade, in addition to the FK cascade)
    - move_card locates the card by id only; from_column_id is never checked

Design Decisions:
    - Only save_board opens an explicit transaction block; other multi-statement
      operations commit statement by statement, in program order
    - Positions are stored as given; no renumbering or dedup
"""

import logging

from sqlalchemy import delete, insert, select, update

from zetodo.core.board_projection import assemble_board
from zetodo.core.domain_types import (
    CardId, ColumnId, ProjectId, new_id, utc_now_iso,
)
from zetodo.infrastructure.database import DatabaseSessionManager
from zetodo.models.card import CardRecord
from zetodo.models.column import ColumnRecord
from zetodo.schemas.board import Board, Card, Column, MoveCardParams
from zetodo.services.row_mapping import (
    card_from_record, card_mutable_values, card_values,
    column_from_record, column_values,
)

logger = logging.getLogger(__name__)


class BoardStore:
    """Board persistence over the shared store handle."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db

    # ─── Whole board ──────────────────────────────────────────────

    def get_board(self, project_id: ProjectId) -> Board:
        with self.db.session() as db:
            columns = [
                column_from_record(r) for r in db.scalars(
                    select(ColumnRecord)
                    .where(ColumnRecord.project_id == project_id)
                    .order_by(ColumnRecord.position),
                )
            ]
            cards = [
                card_from_record(r) for r in db.scalars(
                    select(CardRecord)
                    .where(CardRecord.project_id == project_id)
                    .order_by(CardRecord.position),
                )
            ]
        return assemble_board(project_id, columns, cards, utc_now_iso())

    def save_board(self, project_id: ProjectId, board: Board) -> None:
        """Replace every column and card of the project with the board's."""
        column_rows = [column_values(c, project_id) for c in board.columns]
        card_rows = [card_values(c, project_id) for c in board.cards]
        with self.db.session() as db:
            with db.begin():
                db.execute(delete(CardRecord).where(CardRecord.project_id == project_id))
                db.execute(delete(ColumnRecord).where(ColumnRecord.project_id == project_id))
                if column_rows:
                    db.execute(insert(ColumnRecord), column_rows)
                if card_rows:
                    db.execute(insert(CardRecord), card_rows)
        logger.info(
            f"Board saved: {len(column_rows)} columns, {len(card_rows)} cards",
            extra={"project_id": project_id},
        )

    # ─── Cards ────────────────────────────────────────────────────

    def create_card(self, project_id: ProjectId, card: Card) -> Card:
        now = utc_now_iso()
        stored = card.model_copy(update={
            "id": card.id or new_id(),
            "project_id": project_id,
            "created_at": now,
            "updated_at": now,
        })
        with self.db.session() as db:
            db.add(CardRecord(**card_values(stored, project_id)))
        return stored

    def update_card(self, card: Card) -> Card:
        now = utc_now_iso()
        stored = card.model_copy(update={"updated_at": now})
        with self.db.session() as db:
            db.execute(
                update(CardRecord)
                .where(CardRecord.id == card.id)
                .values(**card_mutable_values(stored)),
            )
        return stored

    def delete_card(self, card_id: CardId) -> None:
        with self.db.session() as db:
            db.execute(delete(CardRecord).where(CardRecord.id == card_id))

    def move_card(self, params: MoveCardParams) -> None:
        now = utc_now_iso()
        with self.db.session() as db:
            db.execute(
                update(CardRecord)
                .where(CardRecord.id == params.card_id)
                .values(
                    column_id=params.to_column_id,
                    position=params.new_position,
                    updated_at=now,
                ),
            )
        logger.info(
            f"Card moved {params.from_column_id} -> {params.to_column_id} "
            f"at {params.new_position}",
            extra={"card_id": params.card_id, "column_id": params.to_column_id},
        )

    # ─── Columns ──────────────────────────────────────────────────

    def create_column(self, project_id: ProjectId, column: Column) -> Column:
        now = utc_now_iso()
        stored = column.model_copy(update={
            "id": column.id or new_id(),
            "project_id": project_id,
            "card_ids": [],
            "created_at": now,
            "updated_at": now,
        })
        with self.db.session() as db:
            db.add(ColumnRecord(**column_values(stored, project_id)))
        return stored

    def update_column(self, column: Column) -> Column:
        now = utc_now_iso()
        with self.db.session() as db:
            db.execute(
                update(ColumnRecord)
                .where(ColumnRecord.id == column.id)
                .values(
                    title=column.title,
                    position=column.position,
                    background_color=column.background_color,
                    updated_at=now,
                ),
            )
        return column.model_copy(update={"updated_at": now})

    def delete_column(self, column_id: ColumnId) -> None:
        with self.db.session() as db:
            db.execute(delete(CardRecord).where(CardRecord.column_id == column_id))
            db.commit()
            db.execute(delete(ColumnRecord).where(ColumnRecord.id == column_id))
        logger.info("Column deleted", extra={"column_id": column_id})
