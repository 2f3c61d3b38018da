"""Services Layer: the project and board stores.

Invariants:
    - Every public store method is exactly one gateway operation
    - Stores take the DatabaseSessionManager by constructor injection

Design Decisions:
    - Record <-> schema conversion kept in row_mapping.py, shared by both stores
"""
