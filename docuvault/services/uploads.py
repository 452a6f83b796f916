"""Uploaded Documents - in-memory list of documents the user scanned themselves.

Invariants:
    - Entries kept in insertion order; no dedup (two scans may share a name)
    - add() validates name, issuer, image_ref before appending
    - remove_at() is all-or-nothing: any out-of-range offset removes nothing

Design Decisions:
    - Not persisted
"""

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from docuvault.core.errors import ResourceNotFoundError, UploadValidationError
from docuvault.schemas.upload import UploadCreate, UploadedDocument

logger = logging.getLogger(__name__)


class UploadedDocuments:
    """User-scanned documents for the current session."""

    def __init__(self):
        self._items: list[UploadedDocument] = []

    @property
    def items(self) -> tuple[UploadedDocument, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, name: str, issuer: str, image_ref: str) -> UploadedDocument:
        """Validate form input and append a new upload."""
        try:
            data = UploadCreate(name=name, issuer=issuer, image_ref=image_ref)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first["loc"])
            raise UploadValidationError(f"{field}: {first['msg']}", field)

        upload = UploadedDocument(
            name=data.name, issuer=data.issuer, image_ref=data.image_ref,
        )
        self._items.append(upload)
        logger.info(
            f"Uploaded document {upload.name!r}",
            extra={"document_id": str(upload.id)},
        )
        return upload

    def remove_at(self, offsets: Iterable[int]) -> list[UploadedDocument]:
        """Remove entries at the given positions. Returns the removed entries."""
        positions = sorted(set(offsets))
        for position in positions:
            if not 0 <= position < len(self._items):
                raise ResourceNotFoundError("Upload", f"offset {position}")

        removed = [self._items[p] for p in positions]
        for position in reversed(positions):
            del self._items[position]
        return removed
