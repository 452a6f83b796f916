"""Key-Value Storages - in-memory and JSON-file implementations of KeyValueStorage.

Invariants:
    - get() of a missing key returns None (never raises for absence)
    - JSON file writes are atomic (temp file + rename)
    - A missing or corrupt JSON file reads as an empty mapping
    - OSError is mapped to StorageError (core/errors.py)

Design Decisions:
    - Whole-file read on every call
    - Values are strings; callers own their encoding (documents JSON, flags)
"""

import json
import logging
from pathlib import Path

from docuvault.core.domain_types import StorageBackend
from docuvault.core.errors import StorageError

logger = logging.getLogger(__name__)


class InMemoryKeyValueStorage:
    """Dict-backed storage. Lost with the process."""

    backend_name = StorageBackend.MEMORY.value

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileKeyValueStorage:
    """Storage persisted as a single JSON object on disk."""

    backend_name = StorageBackend.FILE.value

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        """Read the whole mapping; corrupt or missing file is empty."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(str(e), "read", self.backend_name)
        except UnicodeDecodeError as e:
            logger.warning(
                f"Storage file {self.path} is not valid UTF-8, treating as empty: {e}",
                extra={"backend": self.backend_name},
            )
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(
                f"Storage file {self.path} is not valid JSON, treating as empty: {e}",
                extra={"backend": self.backend_name},
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                f"Storage file {self.path} does not hold a JSON object, treating as empty",
                extra={"backend": self.backend_name},
            )
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        """Write the whole mapping atomically."""
        tmp_file = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            tmp_file.replace(self.path)
        except OSError as e:
            raise StorageError(str(e), "write", self.backend_name)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def keys(self) -> list[str]:
        return list(self._read())
