"""Schemas - field-level validation for uploads and profiles."""

import pytest
from pydantic import ValidationError

from docuvault.schemas.profile import UserProfile
from docuvault.schemas.upload import UploadCreate, UploadedDocument


def test_upload_create_strips_whitespace():
    data = UploadCreate(name=" Lease ", issuer=" Landlord ", image_ref="scan://a")
    assert (data.name, data.issuer) == ("Lease", "Landlord")


def test_upload_create_rejects_blank_name():
    with pytest.raises(ValidationError):
        UploadCreate(name="   ", issuer="Landlord", image_ref="scan://a")


def test_upload_create_rejects_long_issuer():
    with pytest.raises(ValidationError):
        UploadCreate(name="Lease", issuer="x" * 256, image_ref="scan://a")


def test_uploaded_document_gets_id():
    first = UploadedDocument(name="A", issuer="X", image_ref="scan://a")
    second = UploadedDocument(name="A", issuer="X", image_ref="scan://a")
    assert first.id != second.id


def test_user_profile_defaults_empty():
    profile = UserProfile()
    assert profile.name == ""
    assert profile.picture == ""


def test_user_profile_strips():
    assert UserProfile(name=" Ada ", picture=" https://x/y.png ").picture == "https://x/y.png"
