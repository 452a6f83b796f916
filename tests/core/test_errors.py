"""Error hierarchy - codes, categories, envelopes, and logging extras."""

from docuvault.core.errors import (
    DocuVaultError, ErrorCategory, ErrorContext, ErrorSeverity,
    PersistenceDecodeError, PersistenceEncodeError, ResourceNotFoundError,
    StorageError, UploadValidationError,
)


def test_all_errors_share_base():
    for err in (
        PersistenceDecodeError("bad", "documents"),
        PersistenceEncodeError("bad"),
        StorageError("disk full", "write", "file"),
        UploadValidationError("name: required", "name"),
        ResourceNotFoundError("Upload", "offset 3"),
    ):
        assert isinstance(err, DocuVaultError)


def test_storage_error_carries_operation_and_backend():
    err = StorageError("disk full", "write", "file")
    assert err.code == "STORAGE_ERROR"
    assert err.category is ErrorCategory.STORAGE
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "write"
    assert err.context.backend == "file"
    assert str(err) == "Storage write failed: disk full"


def test_to_dict_envelope():
    err = ResourceNotFoundError("Upload", "offset 3")
    body = err.to_dict()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["message"] == "Upload 'offset 3' not found"
    assert "timestamp" in body


def test_log_extra_drops_empty_context():
    err = PersistenceEncodeError("boom")
    assert err.to_log_extra() == {"error_code": "PERSISTENCE_ENCODE_ERROR"}


def test_log_extra_includes_storage_context():
    err = StorageError("locked", "commit", "sql", ErrorContext(storage_key="documents"))
    assert err.to_log_extra() == {
        "error_code": "STORAGE_ERROR",
        "storage_key": "documents",
        "backend": "sql",
        "operation": "commit",
    }


def test_decode_error_records_key():
    err = PersistenceDecodeError("1 validation error(s)", "documents")
    assert err.context.storage_key == "documents"
    assert "documents" in err.message
