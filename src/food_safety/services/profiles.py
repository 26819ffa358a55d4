"""Profile lookup and persistence logic."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from food_safety.domain.profiles import Profile
from food_safety.errors import ProfileNotFoundError, ProfileValidationError

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for health profiles."""

    def get_by_email(self, email: str) -> Profile | None:
        """Return the profile stored for an email, if present."""

    def upsert(self, profile: Profile) -> Profile:
        """Insert or replace a profile and return the stored version."""


@dataclass
class ProfileService:
    """Application service for reading and saving profiles."""

    repository: ProfileRepository

    def get_profile(self, email: str) -> Profile:
        """Return the profile for an email or raise ProfileNotFoundError."""
        normalized = _normalize_email(email)
        if not normalized:
            raise ProfileValidationError("Email is required")
        profile = self.repository.get_by_email(normalized)
        if profile is None:
            raise ProfileNotFoundError(normalized)
        return profile

    def save_profile(self, profile: Profile) -> Profile:
        """Validate and store a profile wholesale."""
        email = _normalize_email(profile.email)
        if not email:
            raise ProfileValidationError("Email is required")
        if not profile.name or profile.age is None or not profile.gender:
            raise ProfileValidationError("Name, age, and gender are required")
        if email != profile.email:
            profile = replace(profile, email=email)
        stored = self.repository.upsert(profile)
        _logger.info("Saved profile: family_members=%s", len(stored.family_members))
        return stored


def _normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()
