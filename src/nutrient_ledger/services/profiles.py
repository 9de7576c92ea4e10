"""Biometric profile lookup and validation."""

from dataclasses import dataclass, fields
from typing import Protocol
from uuid import UUID

from nutrient_ledger.domain.profile import BiometricProfile
from nutrient_ledger.errors import MissingBiometricDataError, UserNotFoundError


class ProfileRepository(Protocol):
    """Read interface for user biometric profiles."""

    def get_profile(self, user_id: UUID) -> BiometricProfile | None:
        """Return the profile for a user, if the user exists."""


def ensure_complete(profile: BiometricProfile, *required: str) -> BiometricProfile:
    """Raise if a biometric field needed for calculations is missing.

    Checks the named fields, or every field when none are named.
    """
    names = required or tuple(item.name for item in fields(profile))
    missing = [name for name in names if getattr(profile, name) is None]
    if missing:
        raise MissingBiometricDataError(missing)
    return profile


@dataclass
class ProfileService:
    """Loads biometric profiles for calculations."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> BiometricProfile:
        """Return a user's profile or raise when the user is unknown."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)
        return profile

    def get_complete_profile(self, user_id: UUID) -> BiometricProfile:
        """Return a user's profile, requiring every biometric field."""
        return ensure_complete(self.get_profile(user_id))
