"""Compatibility scoring for a viewer/candidate pair.

The score is the sum of four independently bounded sub-scores, clamped to
0–100:

- distance (0–30): linear falloff inside the viewer's radius, 0 outside it or
  when either location is unknown (unused points are not redistributed)
- intent (0–30): tier lookup over the unordered intent pair
- interests (0–30): overlap normalised by the smaller interest set
- activity (0–10): bucketed recency of the candidate's last activity

Usage example:
    from match_engine.domain.intent import RelationshipIntent
    from match_engine.domain.profiles import ProfileSnapshot
    from match_engine.domain.scoring import calculate_match_score

    viewer = ProfileSnapshot(
        match_radius_km=25.0,
        relationship_intent=RelationshipIntent.LONG_TERM,
        interests=frozenset({"hiking", "coffee"}),
    )
    candidate = ProfileSnapshot(
        relationship_intent=RelationshipIntent.CASUAL,
        interests=frozenset({"hiking"}),
        last_active_at=now - 2 * 3600,
    )
    assert calculate_match_score(viewer, candidate, 12.5, now=now) == 61
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from .intent import TIER_POINTS, RelationshipIntent, intent_tier
from .profiles import ProfileSnapshot

MAX_DISTANCE_SCORE = 30
MAX_INTENT_SCORE = 30
MAX_INTERESTS_SCORE = 30
MAX_ACTIVITY_SCORE = 10
MAX_TOTAL_SCORE = 100

SECONDS_PER_HOUR = 3600.0

# (hours since last active, exclusive upper bound) → points
ACTIVITY_BUCKETS = (
    (1.0, 10),
    (24.0, 6),
    (72.0, 3),
)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-score breakdown for one viewer/candidate pair."""

    distance_score: int  # 0–30
    intent_score: int  # 0–30
    interests_score: int  # 0–30
    activity_score: int  # 0–10

    @property
    def total(self) -> int:
        """Sum of the sub-scores, clamped to 0–100."""
        raw = self.distance_score + self.intent_score + self.interests_score + self.activity_score
        return max(0, min(MAX_TOTAL_SCORE, raw))


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves away from zero."""
    return math.floor(value + 0.5)


def score_distance(distance_km: float | None, radius_km: float) -> int:
    """Linear falloff from 30 at 0 km to 0 at the radius; 0 beyond it or when unknown."""
    if distance_km is None or distance_km > radius_km or radius_km <= 0:
        return 0
    return round_half_up(MAX_DISTANCE_SCORE * (1 - distance_km / radius_km))


def score_intent(
    viewer_intent: RelationshipIntent | None,
    candidate_intent: RelationshipIntent | None,
) -> int:
    tier = intent_tier(viewer_intent, candidate_intent)
    if tier is None:
        return 0
    return TIER_POINTS[tier]


def score_interests(viewer_interests: frozenset[str], candidate_interests: frozenset[str]) -> int:
    """Shared interests relative to the smaller set, so a subset scores the maximum."""
    if not viewer_interests or not candidate_interests:
        return 0
    common = len(viewer_interests & candidate_interests)
    min_size = min(len(viewer_interests), len(candidate_interests))
    return round_half_up(MAX_INTERESTS_SCORE * common / min_size)


def score_activity(last_active_at: float | None, now: float) -> int:
    """Bucketed recency; no interpolation between buckets."""
    if last_active_at is None:
        return 0
    hours_since_active = (now - last_active_at) / SECONDS_PER_HOUR
    for max_hours, points in ACTIVITY_BUCKETS:
        if hours_since_active < max_hours:
            return points
    return 0


def _resolve_now(now: float | None) -> float:
    if now is not None:
        return now
    return datetime.now(UTC).timestamp()


def calculate_score_breakdown(
    viewer: ProfileSnapshot,
    candidate: ProfileSnapshot,
    distance_km: float | None,
    *,
    now: float | None = None,
) -> ScoreBreakdown:
    """Calculate every sub-score for a candidate as seen by the viewer.

    Args:
        viewer: The viewing user's snapshot (supplies the match radius).
        candidate: The candidate's snapshot (supplies last activity).
        distance_km: Precomputed distance, or None when either location is unknown.
        now: Evaluation instant in epoch seconds; defaults to the current time.
    """
    return ScoreBreakdown(
        distance_score=score_distance(distance_km, viewer.match_radius_km),
        intent_score=score_intent(viewer.relationship_intent, candidate.relationship_intent),
        interests_score=score_interests(viewer.interests, candidate.interests),
        activity_score=score_activity(candidate.last_active_at, _resolve_now(now)),
    )


def calculate_match_score(
    viewer: ProfileSnapshot,
    candidate: ProfileSnapshot,
    distance_km: float | None,
    *,
    now: float | None = None,
) -> int:
    """Total compatibility score in 0–100."""
    return calculate_score_breakdown(viewer, candidate, distance_km, now=now).total
