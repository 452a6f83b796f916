"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - DocumentId and UploadId wrap UUIDs - never use bare UUID in domain logic
    - StorageKey values are the only keys written to key-value storage
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType wrappers, not dataclasses
    - str Enums serialize to JSON as their values
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

DocumentId = NewType("DocumentId", UUID)
UploadId = NewType("UploadId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

LogoAsset = NewType("LogoAsset", str)   # opaque icon key, e.g. "dmv"


# ─── Enums ───────────────────────────────────────────────────────

class CatalogDocumentType(str, Enum):
    """Closed set of document types the wallet knows how to acquire."""
    DRIVERS_LICENSE = "Driver's License"
    VEHICLE_REGISTRATION = "Vehicle Registration"
    HEALTH_INSURANCE = "Health Insurance"
    UTILITY_BILL = "Utility Bill"
    W2 = "W-2"
    BIRTH_CERTIFICATE = "Birth Certificate"
    SOCIAL_SECURITY_CARD = "Social Security Card"
    DEGREE_CERTIFICATE = "Degree Certificate"


class StorageKey(str, Enum):
    """Keys used in the local key-value storage."""
    DOCUMENTS = "documents"
    IS_LOGGED_IN = "isLoggedIn"
    USER_NAME = "userName"
    USER_PICTURE = "userPicture"


class StorageBackend(str, Enum):
    """Available key-value storage implementations."""
    MEMORY = "memory"
    FILE = "file"
    SQL = "sql"


class PictureSource(str, Enum):
    """Where a profile picture reference points to."""
    REMOTE = "remote"
    LOCAL_FILE = "local_file"
    NONE = "none"
