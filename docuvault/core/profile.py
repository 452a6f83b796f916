"""Profile - classify the picture reference handed over by the identity provider.

Invariants:
    - http:// and https:// references are REMOTE
    - file: URLs are LOCAL_FILE
    - Anything else (including empty) is NONE - the UI shows a placeholder
"""

from urllib.parse import urlparse

from docuvault.core.domain_types import PictureSource


def classify_picture(picture: str) -> PictureSource:
    """Decide how a profile picture reference should be loaded."""
    scheme = urlparse(picture.strip()).scheme.lower()
    if scheme in ("http", "https"):
        return PictureSource.REMOTE
    if scheme == "file":
        return PictureSource.LOCAL_FILE
    return PictureSource.NONE
