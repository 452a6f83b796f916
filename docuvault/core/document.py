"""Document - the record a user has obtained into the wallet.

Invariants:
    - id is generated at creation (uuid4) and never changes (model is frozen)
    - Serialized field names are camelCase: id, name, issuer, logoAsset,
      hasVersionHistory, fileURL
    - dedup_key is (name, issuer); identity for removal is id

Design Decisions:
    - Frozen pydantic model, equality by value
    - populate_by_name: Python callers use snake_case, JSON uses camelCase
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from docuvault.core.domain_types import DocumentId


class Document(BaseModel):
    """A document held in the wallet."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: DocumentId = Field(default_factory=lambda: DocumentId(uuid4()))
    name: str
    issuer: str
    logo_asset: str = Field(default="", alias="logoAsset")
    has_version_history: bool = Field(default=False, alias="hasVersionHistory")
    file_url: str | None = Field(default=None, alias="fileURL")

    @property
    def dedup_key(self) -> tuple[str, str]:
        """Two documents with the same key never coexist in a store."""
        return (self.name, self.issuer)
