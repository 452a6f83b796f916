"""Upload Schemas - validation for user-scanned documents.

Invariants:
    - name and issuer: stripped, non-empty, at most 255 chars
    - image_ref: non-empty reference to the scanned image
    - UploadedDocument gets a fresh UploadId at creation

Design Decisions:
    - field_validator only for side-effect-free transforms (strip)
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docuvault.core.domain_types import UploadId


class UploadCreate(BaseModel):
    """Details entered on the "New Document" form."""
    name: str = Field(max_length=255)
    issuer: str = Field(max_length=255)
    image_ref: str = Field(min_length=1)

    @field_validator("name", "issuer")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class UploadedDocument(BaseModel):
    """An uploaded document kept in memory."""

    model_config = ConfigDict(frozen=True)

    id: UploadId = Field(default_factory=lambda: UploadId(uuid4()))
    name: str
    issuer: str
    image_ref: str
