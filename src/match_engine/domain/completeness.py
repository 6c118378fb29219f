"""Profile completeness used as a trust signal next to a profile.

Sections are binary (fully earned or withheld) and weighted to total 100:

- mandatory identity (name, age, gender, 4+ photos): 30
- bio of 20+ trimmed characters: 10
- at least one interest: 15
- relationship intent: 10
- gender preference: 10
- location: 25

The mandatory section stands in for signup verification (phone and selfie
checks happen at signup), so it is never reported as missing.
"""

from __future__ import annotations

from .profiles import ProfileRecord

MANDATORY_WEIGHT = 30
BIO_WEIGHT = 10
INTERESTS_WEIGHT = 15
INTENT_WEIGHT = 10
GENDER_PREFERENCE_WEIGHT = 10
LOCATION_WEIGHT = 25

MIN_PHOTOS = 4
MIN_BIO_LENGTH = 20


def has_mandatory_section(profile: ProfileRecord) -> bool:
    return bool(
        profile.name and profile.age and profile.gender and profile.photo_count >= MIN_PHOTOS
    )


def has_bio(profile: ProfileRecord) -> bool:
    return len(profile.bio.strip()) >= MIN_BIO_LENGTH


def has_valid_location(profile: ProfileRecord) -> bool:
    location = profile.location
    return location is not None and bool(location.latitude) and bool(location.longitude)


def calculate_profile_completeness(profile: ProfileRecord) -> int:
    """Return the completeness percentage (0–100)."""
    completeness = 0
    if has_mandatory_section(profile):
        completeness += MANDATORY_WEIGHT
    if has_bio(profile):
        completeness += BIO_WEIGHT
    if profile.interests:
        completeness += INTERESTS_WEIGHT
    if profile.relationship_intent is not None:
        completeness += INTENT_WEIGHT
    if profile.interested_in:
        completeness += GENDER_PREFERENCE_WEIGHT
    if has_valid_location(profile):
        completeness += LOCATION_WEIGHT
    return completeness


def get_missing_fields(profile: ProfileRecord) -> list[str]:
    """Human-readable labels for the optional sections the profile has not earned."""
    missing: list[str] = []
    if not has_bio(profile):
        missing.append("Bio")
    if not profile.interests:
        missing.append("Interests")
    if profile.relationship_intent is None:
        missing.append("Relationship Intent")
    if not profile.interested_in:
        missing.append("Gender Preference")
    if not has_valid_location(profile):
        missing.append("Location")
    return missing
