"""Tests for document search and grouping - pure, no IO."""

from docuvault.core.document import Document
from docuvault.core.document_queries import filter_documents, group_by_issuer, search_catalog


def _docs() -> list[Document]:
    return [
        Document(name="Driver's License", issuer="California DMV"),
        Document(name="W-2", issuer="IRS"),
        Document(name="Vehicle Registration", issuer="California DMV"),
        Document(name="Utility Bill", issuer="PG&E"),
    ]


def test_blank_query_returns_everything_in_order():
    docs = _docs()
    assert filter_documents(docs, "") == docs
    assert filter_documents(docs, "   ") == docs


def test_filter_matches_name_case_insensitive():
    result = filter_documents(_docs(), "license")
    assert [d.name for d in result] == ["Driver's License"]


def test_filter_matches_issuer():
    result = filter_documents(_docs(), "dmv")
    assert [d.name for d in result] == ["Driver's License", "Vehicle Registration"]


def test_filter_no_match_returns_empty():
    assert filter_documents(_docs(), "passport") == []


def test_group_by_issuer_sorted_keys_and_stable_groups():
    groups = group_by_issuer(_docs())
    assert list(groups) == ["California DMV", "IRS", "PG&E"]
    assert [d.name for d in groups["California DMV"]] == [
        "Driver's License", "Vehicle Registration",
    ]


def test_group_by_issuer_empty():
    assert group_by_issuer([]) == {}


def test_search_catalog_returns_unsaved_documents():
    results = search_catalog("certificate")
    assert {d.name for d in results} == {"Birth Certificate", "Degree Certificate"}
    assert all(d.has_version_history for d in results)


def test_search_catalog_blank_lists_whole_catalog():
    assert len(search_catalog("")) == 8
