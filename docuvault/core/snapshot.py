"""Document Snapshot - JSON encoding / decoding of the document collection.

Invariants:
    - documents_to_json produces a JSON array of camelCase document objects
    - documents_from_json(documents_to_json(docs)) == docs (order and fields)
    - Decode failures raise PersistenceDecodeError; encode failures raise
      PersistenceEncodeError - never a bare pydantic or json error

Design Decisions:
    - One module-level TypeAdapter
    - Pure functions; the store decides whether an error is fatal
"""

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from docuvault.core.document import Document
from docuvault.core.errors import PersistenceDecodeError, PersistenceEncodeError

_DOCUMENT_LIST = TypeAdapter(list[Document])


def documents_to_json(documents: list[Document] | tuple[Document, ...]) -> str:
    """Serialize documents to a JSON array string. Pure, no IO."""
    try:
        return _DOCUMENT_LIST.dump_json(list(documents), by_alias=True).decode("utf-8")
    except PydanticSerializationError as e:
        raise PersistenceEncodeError(str(e))


def documents_from_json(payload: str | bytes, key: str = "documents") -> list[Document]:
    """Parse a JSON array into documents. Pure, no IO.

    `key` is only used to label the error.
    """
    try:
        return _DOCUMENT_LIST.validate_json(payload)
    except ValidationError as e:
        raise PersistenceDecodeError(
            f"{e.error_count()} validation error(s)", key,
        )
