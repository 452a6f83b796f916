"""Domain Types - verifies identity wrappers and enum values.

Tests:
    - NewType wrappers wrap UUIDs
    - Storage keys match the persisted names
    - CatalogDocumentType is the closed set of eight known types
"""

from uuid import uuid4

from docuvault.core.domain_types import (
    CatalogDocumentType, DocumentId, StorageBackend, StorageKey, UploadId,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert DocumentId(uid) == uid
    assert UploadId(uid) == uid


def test_storage_keys_match_persisted_names():
    assert StorageKey.DOCUMENTS.value == "documents"
    assert StorageKey.IS_LOGGED_IN.value == "isLoggedIn"
    assert StorageKey.USER_NAME.value == "userName"
    assert StorageKey.USER_PICTURE.value == "userPicture"


def test_catalog_has_eight_document_types():
    assert len(CatalogDocumentType) == 8
    assert CatalogDocumentType.W2.value == "W-2"


def test_storage_backends():
    assert {b.value for b in StorageBackend} == {"memory", "file", "sql"}
