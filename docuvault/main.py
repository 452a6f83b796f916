"""DocuVault Composition Root - builds storage, store, and services from settings.

Invariants:
    - Exactly one DocumentStore per AppContext; every service gets the same instance
    - Logging configured before the store loads (load failures are logged)
    - Storage backend chosen only from Settings.storage_backend

Design Decisions:
    - Explicit factory, no global store; callers own the context lifetime
    - close() disposes the SQL engine when the sql backend is used
"""

import logging
from dataclasses import dataclass, field

from docuvault.config import Settings, get_settings
from docuvault.core.domain_types import StorageBackend
from docuvault.core.repository_protocols import KeyValueStorage
from docuvault.infrastructure.database import DatabaseSessionManager, SqlKeyValueStorage
from docuvault.infrastructure.key_value_storage import (
    InMemoryKeyValueStorage, JsonFileKeyValueStorage,
)
from docuvault.infrastructure.observability import setup_logging
from docuvault.services.account import AccountSession
from docuvault.services.document_store import DocumentStore
from docuvault.services.uploads import UploadedDocuments

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a presentation layer needs, wired together."""
    settings: Settings
    storage: KeyValueStorage
    store: DocumentStore
    account: AccountSession
    uploads: UploadedDocuments = field(default_factory=UploadedDocuments)
    db_manager: DatabaseSessionManager | None = None

    def close(self) -> None:
        if self.db_manager is not None:
            self.db_manager.dispose()


def build_storage(
    settings: Settings,
) -> tuple[KeyValueStorage, DatabaseSessionManager | None]:
    """Instantiate the configured key-value storage."""
    if settings.storage_backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStorage(), None
    if settings.storage_backend == StorageBackend.FILE:
        return JsonFileKeyValueStorage(settings.storage_path), None
    manager = DatabaseSessionManager(settings.database_url)
    return SqlKeyValueStorage(manager), manager


def create_context(
    settings: Settings | None = None, configure_logging: bool = True,
) -> AppContext:
    """Wire storage, store, and services for one application run."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)

    storage, db_manager = build_storage(settings)
    store = DocumentStore(storage, key=settings.documents_key)
    account = AccountSession(storage, store)
    logger.info(
        f"DocuVault ready with {len(store)} document(s)",
        extra={"backend": storage.backend_name, "storage_key": settings.documents_key},
    )
    return AppContext(
        settings=settings,
        storage=storage,
        store=store,
        account=account,
        db_manager=db_manager,
    )
