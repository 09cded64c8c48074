"""
Repository for saved household profiles.

This is the only place saved inputs and tracked holdings are read or
written; the calculators only ever receive plain records from it.
"""

import logging
import re
from datetime import datetime, timezone
from typing import List

from pydantic import ValidationError

from finance_planner.models.holdings import SavedProfile
from finance_planner.storage.base import StorageNotFoundError, StorageService

logger = logging.getLogger(__name__)

PROFILE_PREFIX = "profiles/"
_PROFILE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class ProfileError(Exception):
    """Base exception for saved-profile errors."""


class ProfileNotFoundError(ProfileError):
    """Raised when no profile is saved under the requested id."""


class ProfileRepository:
    """Loads and saves SavedProfile documents through a storage backend."""

    def __init__(self, storage: StorageService) -> None:
        self.storage = storage

    @staticmethod
    def _key(profile_id: str) -> str:
        if not _PROFILE_ID_PATTERN.match(profile_id):
            raise ProfileError(f"Invalid profile id: {profile_id!r}")
        return f"{PROFILE_PREFIX}{profile_id}.json"

    def save_profile(self, profile_id: str, profile: SavedProfile) -> SavedProfile:
        """Persist a profile, stamping it with the save time.

        Returns:
            The profile as stored
        """
        stored = profile.model_copy(update={"saved_at": datetime.now(timezone.utc)})
        self.storage.store_json(self._key(profile_id), stored.model_dump(mode="json"))
        logger.info(f"Saved profile {profile_id}")
        return stored

    def load_profile(self, profile_id: str) -> SavedProfile:
        """Load a saved profile.

        Raises:
            ProfileNotFoundError: If nothing is saved under ``profile_id``
            ProfileError: If the stored document is not a valid profile
        """
        try:
            document = self.storage.retrieve_json(self._key(profile_id))
        except StorageNotFoundError:
            raise ProfileNotFoundError(f"Profile not found: {profile_id}")

        try:
            return SavedProfile.model_validate(document)
        except ValidationError as e:
            logger.warning(f"Saved profile {profile_id} is invalid: {e}")
            raise ProfileError(f"Saved profile {profile_id} is invalid: {e}")

    def delete_profile(self, profile_id: str) -> bool:
        """Forget a saved profile. Returns False if nothing was saved."""
        deleted = self.storage.delete_file(self._key(profile_id))
        if deleted:
            logger.info(f"Deleted profile {profile_id}")
        return deleted

    def list_profiles(self) -> List[str]:
        """Ids of all saved profiles, sorted."""
        return [
            key[len(PROFILE_PREFIX) : -len(".json")]
            for key in self.storage.list_files(PROFILE_PREFIX)
            if key.endswith(".json")
        ]
