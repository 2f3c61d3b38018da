"""Pydantic Schemas: wire models for projects, columns, cards and the board.

Invariants:
    - Schemas validate at system boundary (request bodies, store inputs)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
