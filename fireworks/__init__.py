"""Fireworks Show Package — in-memory model of shows, vendors, and towns.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports from fireworks.core.* only, no star exports
"""
