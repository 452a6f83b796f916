"""Account Session - login flag and profile written by the identity-provider login flow.

Invariants:
    - State lives in the key-value storage under isLoggedIn, userName, userPicture
    - sign_in stores the provider's display name and picture and sets isLoggedIn
    - sign_out clears the document store first, then the profile keys and flag
    - Credentials never reach this class; only name and picture do

Design Decisions:
    - No cached copy: every read goes to storage
    - StorageError propagates to the caller (document persistence is the only swallowing path)
"""

import logging

from pydantic import ValidationError

from docuvault.core.domain_types import StorageKey
from docuvault.core.errors import ProfileValidationError
from docuvault.core.repository_protocols import KeyValueStorage
from docuvault.schemas.profile import UserProfile
from docuvault.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

_TRUE = "true"


def _build_profile(name: str, picture: str) -> UserProfile:
    """Validate profile fields, mapping pydantic errors to ProfileValidationError."""
    try:
        return UserProfile(name=name, picture=picture)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"])
        raise ProfileValidationError(first["msg"], field)


class AccountSession:
    """Signed-in state and profile for the single local user."""

    def __init__(self, storage: KeyValueStorage, store: DocumentStore):
        self.storage = storage
        self.store = store

    @property
    def is_signed_in(self) -> bool:
        return self.storage.get(StorageKey.IS_LOGGED_IN.value) == _TRUE

    @property
    def profile(self) -> UserProfile:
        return _build_profile(
            self.storage.get(StorageKey.USER_NAME.value) or "",
            self.storage.get(StorageKey.USER_PICTURE.value) or "",
        )

    def sign_in(self, name: str, picture: str = "") -> UserProfile:
        """Record a successful identity-provider login."""
        profile = _build_profile(name, picture)
        self._write_profile(profile)
        self.storage.set(StorageKey.IS_LOGGED_IN.value, _TRUE)
        logger.info("User signed in")
        return profile

    def update_profile(
        self, name: str | None = None, picture: str | None = None,
    ) -> UserProfile:
        """Apply settings-screen edits; None leaves a field unchanged."""
        current = self.profile
        profile = _build_profile(
            current.name if name is None else name,
            current.picture if picture is None else picture,
        )
        self._write_profile(profile)
        return profile

    def sign_out(self) -> None:
        """Forget the user: documents, profile, and login flag."""
        self.store.clear()
        for key in (
            StorageKey.USER_NAME, StorageKey.USER_PICTURE, StorageKey.IS_LOGGED_IN,
        ):
            self.storage.delete(key.value)
        logger.info("User signed out")

    def _write_profile(self, profile: UserProfile) -> None:
        self.storage.set(StorageKey.USER_NAME.value, profile.name)
        self.storage.set(StorageKey.USER_PICTURE.value, profile.picture)
