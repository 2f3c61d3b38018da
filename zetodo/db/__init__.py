"""Database Schema: declarative Base and the forward-only migration steps.

Invariants:
    - Tables are created only by migrations, never by Base.metadata.create_all
    - SQLite with foreign keys enforced on every connection

Design Decisions:
    - One schema_version row per applied step (see db/migrations)
"""
