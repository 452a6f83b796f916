"""Profile Schemas - display name and picture received from the identity provider.

Invariants:
    - name stripped, at most 255 chars (empty allowed: provider may omit it)
    - picture stripped; empty means "no picture"
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docuvault.core.domain_types import PictureSource
from docuvault.core.profile import classify_picture


class UserProfile(BaseModel):
    """Profile shown in the settings header."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", max_length=255)
    picture: str = Field(default="", max_length=2048)

    @field_validator("name", "picture")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @property
    def picture_source(self) -> PictureSource:
        return classify_picture(self.picture)
