"""Pydantic Schemas — validated status snapshots for logging and export.

Invariants:
    - Schemas validate at the boundary (snapshots leaving the core)
    - Domain types from core/ used for enum fields
"""
