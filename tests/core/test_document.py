"""Document model - identity, immutability, and field aliases."""

from uuid import UUID

import pytest
from pydantic import ValidationError

from docuvault.core.document import Document


def test_id_generated_at_creation():
    doc = Document(name="W-2", issuer="IRS")
    assert isinstance(doc.id, UUID)


def test_each_document_gets_its_own_id():
    assert Document(name="W-2", issuer="IRS").id != Document(name="W-2", issuer="IRS").id


def test_document_is_immutable():
    doc = Document(name="W-2", issuer="IRS")
    with pytest.raises(ValidationError):
        doc.name = "1099"


def test_accepts_camel_case_field_names():
    doc = Document.model_validate({
        "name": "Utility Bill",
        "issuer": "PG&E",
        "logoAsset": "pge",
        "hasVersionHistory": True,
        "fileURL": "file:///tmp/bill.pdf",
    })
    assert doc.logo_asset == "pge"
    assert doc.has_version_history is True
    assert doc.file_url == "file:///tmp/bill.pdf"


def test_dumps_camel_case_by_alias():
    doc = Document(name="W-2", issuer="IRS", logo_asset="irs")
    data = doc.model_dump(by_alias=True, mode="json")
    assert set(data) == {"id", "name", "issuer", "logoAsset", "hasVersionHistory", "fileURL"}
    assert data["fileURL"] is None


def test_dedup_key_is_name_and_issuer():
    doc = Document(name="W-2", issuer="IRS", logo_asset="irs")
    assert doc.dedup_key == ("W-2", "IRS")


def test_name_and_issuer_required():
    with pytest.raises(ValidationError):
        Document(name="W-2")
