"""Infrastructure Layer - storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - Every backend-specific exception is mapped to StorageError (core/errors.py)

Design Decisions:
    - One module per concern: logging, key-value storages, SQL session management
"""
