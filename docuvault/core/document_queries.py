"""Document Queries - search and grouping used by the wallet screens.

Invariants:
    - Pure functions: no IO, no mutation of inputs
    - Case-insensitive substring match on name OR issuer
    - Blank query matches everything; input order preserved
    - group_by_issuer returns issuers in sorted order, documents in input order

Design Decisions:
    - Plain substring matching, not fuzzy
    - search_catalog returns unsaved Documents so the caller can hand one to the store
"""

from collections.abc import Iterable

from docuvault.core.catalog import CATALOG
from docuvault.core.document import Document


def _matches(document: Document, needle: str) -> bool:
    """Check if needle occurs in name or issuer (needle already lowercased)."""
    return needle in document.name.lower() or needle in document.issuer.lower()


def filter_documents(documents: Iterable[Document], query: str) -> list[Document]:
    """Documents whose name or issuer contains query, case-insensitive."""
    needle = query.strip().lower()
    if not needle:
        return list(documents)
    return [d for d in documents if _matches(d, needle)]


def group_by_issuer(documents: Iterable[Document]) -> dict[str, list[Document]]:
    """Group documents by issuer; keys sorted, groups keep input order."""
    groups: dict[str, list[Document]] = {}
    for document in documents:
        groups.setdefault(document.issuer, []).append(document)
    return {issuer: groups[issuer] for issuer in sorted(groups)}


def search_catalog(query: str) -> list[Document]:
    """Catalog types matching query, as fresh (not yet stored) documents."""
    candidates = [
        Document(
            name=doc_type.value,
            issuer=entry.issuer,
            logo_asset=entry.logo_asset,
            has_version_history=True,
        )
        for doc_type, entry in CATALOG.items()
    ]
    return filter_documents(candidates, query)
