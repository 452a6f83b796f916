"""Root conftest - shared test configuration and fixtures."""

import os

import pytest

# Ensure tests never read a developer's .env-configured storage
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from docuvault.core.document import Document  # noqa: E402
from docuvault.infrastructure.key_value_storage import InMemoryKeyValueStorage  # noqa: E402
from docuvault.services.document_store import DocumentStore  # noqa: E402


@pytest.fixture
def memory_storage():
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(memory_storage):
    return DocumentStore(memory_storage)


@pytest.fixture
def w2():
    return Document(name="W-2", issuer="IRS", logo_asset="irs", has_version_history=True)


@pytest.fixture
def license_doc():
    return Document(
        name="Driver's License", issuer="California DMV",
        logo_asset="dmv", has_version_history=True,
    )
