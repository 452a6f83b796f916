"""Structured Logging - JSON formatter and setup for DocuVault logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (document_id, storage_key, backend, error_code, operation)
      surfaced when present
    - JSON format by default, human-readable when fmt="text"

Design Decisions:
    - setup_logging called once by the composition root (main.create_context)
    - Re-running setup_logging replaces the handler it installed earlier
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "document_id", "storage_key", "backend", "error_code", "operation",
)
_HANDLER_NAME = "docuvault"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
