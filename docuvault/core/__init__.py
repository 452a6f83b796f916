"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/, or db/
    - All functions are pure and deterministic (uuid generation aside)

Design Decisions:
    - Functional core separated from imperative shell (store, storages)
"""
