"""Immutable profile views consumed by eligibility, scoring and completeness."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint
from .intent import RelationshipIntent

DEFAULT_MATCH_RADIUS_KM = 25.0


@dataclass(frozen=True)
class ProfileSnapshot:
    """Attributes the compatibility scorer reads from either side of a pair."""

    location: GeoPoint | None = None
    match_radius_km: float = DEFAULT_MATCH_RADIUS_KM  # viewer side only
    relationship_intent: RelationshipIntent | None = None
    interests: frozenset[str] = field(default_factory=frozenset)
    last_active_at: float | None = None  # epoch seconds, UTC


@dataclass(frozen=True)
class FilterSubject:
    """Viewer-side attributes used by the eligibility filter."""

    interested_in: frozenset[str] = field(default_factory=frozenset)
    relationship_intent: RelationshipIntent | None = None


@dataclass(frozen=True)
class FilterCandidate:
    """Candidate-side attributes used by the eligibility filter."""

    gender: str
    relationship_intent: RelationshipIntent | None = None


@dataclass(frozen=True)
class ProfileRecord:
    """Validated view of one user document."""

    user_id: str
    name: str = ""
    age: int | None = None
    gender: str = ""
    photo_count: int = 0
    bio: str = ""
    interests: frozenset[str] = field(default_factory=frozenset)
    relationship_intent: RelationshipIntent | None = None
    interested_in: frozenset[str] = field(default_factory=frozenset)
    location: GeoPoint | None = None
    match_radius_km: float = DEFAULT_MATCH_RADIUS_KM
    last_active_at: float | None = None
    occupation: str | None = None
    height_cm: float | None = None

    @property
    def has_preferences(self) -> bool:
        """True once the user has chosen interests or an intent."""
        return bool(self.interests) or self.relationship_intent is not None

    def to_snapshot(self) -> ProfileSnapshot:
        return ProfileSnapshot(
            location=self.location,
            match_radius_km=self.match_radius_km,
            relationship_intent=self.relationship_intent,
            interests=self.interests,
            last_active_at=self.last_active_at,
        )

    def to_filter_subject(self) -> FilterSubject:
        return FilterSubject(
            interested_in=self.interested_in,
            relationship_intent=self.relationship_intent,
        )

    def to_filter_candidate(self) -> FilterCandidate:
        return FilterCandidate(gender=self.gender, relationship_intent=self.relationship_intent)
