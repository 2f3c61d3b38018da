"""Route Dependencies: store providers bound to the process-wide gateway.

Invariants:
    - Stores are built per request around the single DatabaseSessionManager
    - Raises StoreNotInitializedError when the app started without a store

Design Decisions:
    - Plain functions for Depends(): tests swap the gateway, not the stores
"""

from zetodo.infrastructure.database import get_db_manager
from zetodo.services.board_store import BoardStore
from zetodo.services.project_store import ProjectStore


def get_project_store() -> ProjectStore:
    return ProjectStore(get_db_manager())


def get_board_store() -> BoardStore:
    return BoardStore(get_db_manager())
