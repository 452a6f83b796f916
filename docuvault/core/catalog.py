"""Document Catalog - fixed table of known document types and their issuers.

Invariants:
    - Catalog is read-only; every CatalogDocumentType has exactly one entry
    - lookup_catalog never raises - unknown names return None
    - Documents built from the catalog always carry has_version_history=True

Design Decisions:
    - Enum keys internally, plain-string lookup at the edge
    - CatalogEntry is a NamedTuple so it compares equal to an (issuer, logo) tuple
"""

from typing import NamedTuple

from docuvault.core.document import Document
from docuvault.core.domain_types import CatalogDocumentType, LogoAsset


class CatalogEntry(NamedTuple):
    """Issuer and icon for a known document type."""
    issuer: str
    logo_asset: LogoAsset


CATALOG: dict[CatalogDocumentType, CatalogEntry] = {
    CatalogDocumentType.DRIVERS_LICENSE: CatalogEntry("California DMV", LogoAsset("dmv")),
    CatalogDocumentType.VEHICLE_REGISTRATION: CatalogEntry("California DMV", LogoAsset("dmv")),
    CatalogDocumentType.HEALTH_INSURANCE: CatalogEntry("Anthem Blue Cross", LogoAsset("anthem")),
    CatalogDocumentType.UTILITY_BILL: CatalogEntry("PG&E", LogoAsset("pge")),
    CatalogDocumentType.W2: CatalogEntry("IRS", LogoAsset("irs")),
    CatalogDocumentType.BIRTH_CERTIFICATE: CatalogEntry("State of California", LogoAsset("caliseal")),
    CatalogDocumentType.SOCIAL_SECURITY_CARD: CatalogEntry("SSA", LogoAsset("ssa")),
    CatalogDocumentType.DEGREE_CERTIFICATE: CatalogEntry(
        "University of California, Davis", LogoAsset("ucdavis"),
    ),
}


def parse_document_type(name: str) -> CatalogDocumentType | None:
    """Map a display name to its catalog type. Exact match, None if unknown."""
    try:
        return CatalogDocumentType(name)
    except ValueError:
        return None


def lookup_catalog(name: str) -> CatalogEntry | None:
    """Return (issuer, logo_asset) for a known document name, else None."""
    doc_type = parse_document_type(name)
    if doc_type is None:
        return None
    return CATALOG[doc_type]


def document_from_catalog(name: str) -> Document | None:
    """Build a new Document for a catalog name. None on catalog miss."""
    entry = lookup_catalog(name)
    if entry is None:
        return None
    return Document(
        name=name,
        issuer=entry.issuer,
        logo_asset=entry.logo_asset,
        has_version_history=True,
    )
