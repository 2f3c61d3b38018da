"""Board Projection: assembles the Board read-model from column and card rows.

Invariants:
    - Pure: no IO, no clock reads (the caller passes `now`)
    - Column order is preserved as given (callers pass rows sorted by position)
    - Each column's card_ids lists exactly the cards with that column_id, in input order
    - Cards whose column_id matches no column stay in `cards` but in no card_ids list

Design Decisions:
    - Board is never persisted: it is recomputed on every read so it cannot drift
      from the underlying rows
    - title/created_at/updated_at are synthetic placeholders, not drawn from storage
"""

from collections import defaultdict

from zetodo.core.domain_types import BOARD_TITLE, ProjectId
from zetodo.schemas.board import Board, Card, Column


def group_card_ids(cards: list[Card]) -> dict[str, list[str]]:
    """Map column_id -> ordered card ids."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for card in cards:
        grouped[card.column_id].append(card.id)
    return grouped


def assemble_board(
    project_id: ProjectId, columns: list[Column], cards: list[Card], now: str,
) -> Board:
    grouped = group_card_ids(cards)
    return Board(
        id=project_id,
        title=BOARD_TITLE,
        columns=[
            column.model_copy(update={"card_ids": list(grouped.get(column.id, []))})
            for column in columns
        ],
        cards=list(cards),
        created_at=now,
        updated_at=now,
    )
