"""Card scheduling: priority, start_date, due_date.

Version: 2

Existing cards get priority 'low' and no dates.
"""

import sqlalchemy as sa
from alembic.operations import Operations

version = 2
description = "cards.priority, cards.start_date, cards.due_date"


def upgrade(op: Operations) -> None:
    op.add_column(
        "cards", sa.Column("priority", sa.Text, nullable=True, server_default="low"),
    )
    op.add_column("cards", sa.Column("start_date", sa.Text, nullable=True))
    op.add_column("cards", sa.Column("due_date", sa.Text, nullable=True))
