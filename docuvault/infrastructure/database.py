"""Database Session Manager - SQLAlchemy sessions with automatic rollback, plus SQL key-value storage.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)
    - In-memory SQLite shares one connection (StaticPool) so all sessions see one DB

Design Decisions:
    - Synchronous engine and sessions
    - Schema created on construction (create_all), no migrations
    - expire_on_commit=False
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, select, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from docuvault.core.domain_types import StorageBackend
from docuvault.core.errors import StorageError
from docuvault.db.base import Base
from docuvault.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)

_BACKEND = StorageBackend.SQL.value
_IN_MEMORY_SQLITE = ("sqlite://", "sqlite:///:memory:")


class DatabaseSessionManager:
    """Manages database sessions with rollback and health checks."""

    def __init__(self, database_url: str, echo: bool = False):
        if database_url in _IN_MEMORY_SQLITE:
            self.engine = create_engine(
                database_url,
                echo=echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            self.engine = create_engine(
                database_url, echo=echo, pool_pre_ping=True,
            )
        self._session_factory = sessionmaker(
            self.engine, class_=Session, expire_on_commit=False,
        )

    def create_schema(self) -> None:
        """Create all tables known to Base.metadata."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"DB schema creation failed: {e}")
            raise StorageError("Schema creation failed", "create_schema", _BACKEND)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise StorageError("Integrity constraint violated", "commit", _BACKEND)
        except OperationalError as e:
            session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StorageError("Connection or operational error", "execute", _BACKEND)
        except DBAPIError as e:
            session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StorageError("Database driver error", "query", _BACKEND)
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageError("Database operation failed", "unknown", _BACKEND)
        finally:
            session.close()

    def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except StorageError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


class SqlKeyValueStorage:
    """KeyValueStorage backed by the kv_entries table."""

    backend_name = _BACKEND

    def __init__(self, manager: DatabaseSessionManager):
        self.manager = manager
        self.manager.create_schema()

    def get(self, key: str) -> str | None:
        with self.manager.session() as db:
            entry = db.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    def set(self, key: str, value: str) -> None:
        with self.manager.session() as db:
            entry = db.get(KeyValueEntry, key)
            if entry is None:
                db.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            db.commit()

    def delete(self, key: str) -> None:
        with self.manager.session() as db:
            entry = db.get(KeyValueEntry, key)
            if entry is not None:
                db.delete(entry)
                db.commit()

    def keys(self) -> list[str]:
        with self.manager.session() as db:
            result = db.execute(select(KeyValueEntry.key).order_by(KeyValueEntry.key))
            return list(result.scalars())
