"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - All storage IO accessed through the KeyValueStorage Protocol
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol, not ABC (structural subtyping)
    - Synchronous methods
"""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Contract for local key-value persistence - implemented by shell.

    Implementations raise StorageError (core/errors.py) on IO failure.
    """
    backend_name: str

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...
    def keys(self) -> list[str]: ...
