"""Viewer-chosen filters for the "who liked you" list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .intent import RelationshipIntent


@dataclass(frozen=True)
class NumericRange:
    """Inclusive numeric bounds."""

    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class LikerFilters:
    """Optional filters; a None field is not applied."""

    age_range: NumericRange | None = None
    height_range: NumericRange | None = None  # cm
    relationship_intents: frozenset[RelationshipIntent] | None = None
    max_distance_km: float | None = None
    occupations: frozenset[str] | None = None
    trust_score_range: NumericRange | None = None
    match_score_range: NumericRange | None = None


@dataclass(frozen=True)
class LikerFacts:
    """The liker attributes the filters inspect."""

    age: int | None
    height_cm: float | None
    relationship_intent: RelationshipIntent | None
    distance_km: float | None
    occupation: str | None
    completeness: int
    match_score: int


def matches_liker_filters(facts: LikerFacts, filters: LikerFilters) -> bool:
    """Return True when the liker satisfies every configured filter."""
    if filters.age_range is not None:
        if facts.age is None or not filters.age_range.contains(facts.age):
            return False

    # Likers without a height are not excluded by a height range.
    if filters.height_range is not None and facts.height_cm:
        if not filters.height_range.contains(facts.height_cm):
            return False

    if filters.relationship_intents:
        if facts.relationship_intent not in filters.relationship_intents:
            return False

    if filters.max_distance_km is not None and facts.distance_km is not None:
        if facts.distance_km > filters.max_distance_km:
            return False

    if filters.occupations:
        if not facts.occupation or facts.occupation not in filters.occupations:
            return False

    if filters.trust_score_range is not None:
        if not filters.trust_score_range.contains(facts.completeness):
            return False

    if filters.match_score_range is not None:
        if not filters.match_score_range.contains(facts.match_score):
            return False

    return True


def collect_occupations(occupations: Iterable[str | None]) -> list[str]:
    """Sorted unique non-empty occupations."""
    return sorted({occupation for occupation in occupations if occupation})
