"""Key-Value Entry ORM - one row per storage key.

Invariants:
    - key is the primary key (at most one value per key)
    - value is the raw string payload (documents JSON, profile fields)
    - updated_at refreshed on every write

Design Decisions:
    - Text column for value (unbounded)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from docuvault.db.base import Base


class KeyValueEntry(Base):
    """A single persisted key/value pair."""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
