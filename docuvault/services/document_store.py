"""Document Store - the single source of truth for a user's wallet documents.

Invariants:
    - No two held documents share (name, issuer); add() of a duplicate is a no-op
    - remove() deletes every entry with the given id (normally one)
    - Insertion order preserved for display
    - load() runs once at construction; save() after every effective mutation
    - Missing or corrupt persisted data loads as an empty collection
    - load() keeps the first entry per (name, issuer) and drops later ones
    - Persistence failures are logged and swallowed; in-memory state is never rolled back
    - Observers are called with the new snapshot after each effective mutation only

Design Decisions:
    - Constructed explicitly and passed by reference (no module-level singleton)
    - Observer registration returns an unsubscribe callable
    - Observer exceptions propagate to the mutating caller
"""

import logging
from collections.abc import Callable
from uuid import UUID

from docuvault.core.catalog import CatalogEntry, document_from_catalog, lookup_catalog
from docuvault.core.document import Document
from docuvault.core.document_queries import filter_documents, group_by_issuer
from docuvault.core.domain_types import StorageKey
from docuvault.core.errors import DocuVaultError
from docuvault.core.repository_protocols import KeyValueStorage
from docuvault.core.snapshot import documents_from_json, documents_to_json

logger = logging.getLogger(__name__)

DocumentsObserver = Callable[[tuple[Document, ...]], None]


def _first_per_dedup_key(documents: list[Document]) -> list[Document]:
    """Keep the first document for each (name, issuer), in order."""
    seen: set[tuple[str, str]] = set()
    kept = []
    for doc in documents:
        if doc.dedup_key in seen:
            continue
        seen.add(doc.dedup_key)
        kept.append(doc)
    return kept


class DocumentStore:
    """Ordered, deduplicated, persisted collection of documents."""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = StorageKey.DOCUMENTS.value,
    ):
        self.storage = storage
        self.key = key
        self._documents: list[Document] = []
        self._observers: list[DocumentsObserver] = []
        self.load()

    # --- Read access -----------------------------------------------------------

    @property
    def documents(self) -> tuple[Document, ...]:
        """Immutable snapshot of the collection, in insertion order."""
        return tuple(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def find(self, document_id: UUID) -> Document | None:
        return next((d for d in self._documents if d.id == document_id), None)

    def search(self, query: str) -> list[Document]:
        return filter_documents(self._documents, query)

    def grouped_by_issuer(self) -> dict[str, list[Document]]:
        return group_by_issuer(self._documents)

    def lookup_catalog(self, name: str) -> CatalogEntry | None:
        """(issuer, logo_asset) for a known document name, None otherwise."""
        return lookup_catalog(name)

    # --- Mutations -------------------------------------------------------------

    def add(self, document: Document) -> bool:
        """Append unless (name, issuer) already held. Returns True if inserted."""
        if any(d.dedup_key == document.dedup_key for d in self._documents):
            logger.debug(
                f"Skipping duplicate document {document.name!r} from {document.issuer!r}",
                extra={"document_id": str(document.id)},
            )
            return False
        self._documents.append(document)
        logger.info(
            f"Added document {document.name!r}",
            extra={"document_id": str(document.id)},
        )
        self._changed()
        return True

    def remove(self, document: Document) -> int:
        """Remove every entry whose id matches. Returns the number removed."""
        kept = [d for d in self._documents if d.id != document.id]
        removed = len(self._documents) - len(kept)
        if removed == 0:
            return 0
        self._documents = kept
        logger.info(
            f"Removed document {document.name!r}",
            extra={"document_id": str(document.id)},
        )
        self._changed()
        return removed

    def acquire(self, name: str) -> Document | None:
        """Complete the "get document" flow for a catalog name.

        Returns the held document for that (name, issuer), or None on a
        catalog miss (nothing happens).
        """
        candidate = document_from_catalog(name)
        if candidate is None:
            logger.debug(f"No catalog entry for {name!r}")
            return None
        self.add(candidate)
        return next(d for d in self._documents if d.dedup_key == candidate.dedup_key)

    def clear(self) -> None:
        """Drop every document and the persisted payload."""
        self._documents = []
        try:
            self.storage.delete(self.key)
        except DocuVaultError as e:
            logger.warning(
                f"Could not delete persisted documents: {e.message}",
                extra=e.to_log_extra(),
            )
        self._notify()

    # --- Observers -------------------------------------------------------------

    def subscribe(self, observer: DocumentsObserver) -> Callable[[], None]:
        """Register observer; call the returned function to unsubscribe."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.documents
        for observer in list(self._observers):
            observer(snapshot)

    def _changed(self) -> None:
        self.save()
        self._notify()

    # --- Persistence -----------------------------------------------------------

    def load(self) -> None:
        """Replace the collection with the persisted one; empty on any failure."""
        try:
            payload = self.storage.get(self.key)
            documents = documents_from_json(payload, self.key) if payload else []
        except DocuVaultError as e:
            logger.warning(
                f"Could not load documents, starting empty: {e.message}",
                extra=e.to_log_extra(),
            )
            documents = []
        self._documents = _first_per_dedup_key(documents)
        logger.debug(
            f"Loaded {len(self._documents)} document(s)",
            extra={"storage_key": self.key},
        )

    def save(self) -> bool:
        """Persist the collection. Returns False (and logs) on failure."""
        try:
            self.storage.set(self.key, documents_to_json(self._documents))
        except DocuVaultError as e:
            logger.warning(
                f"Could not save documents: {e.message}",
                extra=e.to_log_extra(),
            )
            return False
        return True
