"""Error Hierarchy - typed, categorized exceptions for all DocuVault failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (bad user input, missing resource) are raised to the caller
    - Persistence errors are raised by codecs/storages and caught by the store
    - to_dict() produces a flat envelope; to_log_extra() feeds logging extras

Design Decisions:
    - Single hierarchy with DocuVaultError base
    - ErrorContext as dataclass, independent of the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERSISTENCE = "persistence"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    document_id: str | None = None
    storage_key: str | None = None
    backend: str | None = None
    debug_info: dict[str, Any] | None = None


class DocuVaultError(Exception):
    """Base exception for all DocuVault errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "document_id": self.context.document_id,
                    "storage_key": self.context.storage_key,
                    "backend": self.context.backend,
                },
            }
        }

    def to_log_extra(self) -> dict:
        """Fields for `logger.x(..., extra=...)`; None values dropped."""
        extra = {
            "error_code": self.code,
            "document_id": self.context.document_id,
            "storage_key": self.context.storage_key,
            "backend": self.context.backend,
        }
        return {k: v for k, v in extra.items() if v is not None}


# ─── Domain Errors ──────────────────────────────────────────────

class UploadValidationError(DocuVaultError):
    """Uploaded document details failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UPLOAD_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class ProfileValidationError(DocuVaultError):
    """Profile data from the identity provider or settings failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PROFILE_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class ResourceNotFoundError(DocuVaultError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Persistence Errors ─────────────────────────────────────────

class PersistenceDecodeError(DocuVaultError):
    """Stored payload could not be decoded into documents."""
    def __init__(self, message: str, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.storage_key = key
        super().__init__(
            f"Could not decode '{key}': {message}",
            "PERSISTENCE_DECODE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.WARNING, ctx,
        )


class PersistenceEncodeError(DocuVaultError):
    """Documents could not be encoded for storage."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not encode documents: {message}",
            "PERSISTENCE_ENCODE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.WARNING, context,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class StorageError(DocuVaultError):
    """Key-value storage operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        backend: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.backend = backend
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation

    def to_log_extra(self) -> dict:
        return {**super().to_log_extra(), "operation": self.operation}
