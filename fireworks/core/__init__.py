"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - All aggregate state lives in memory for the lifetime of the owner

Design Decisions:
    - Functional core (enforce_launch, warning_timeline, format_status, show_stats)
      separated from the stateful aggregates (Show, CompanyShow, Town)
"""
