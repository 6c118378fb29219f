"""Ranking and filtering of users who liked the viewer ("who liked you")."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from ..domain.completeness import calculate_profile_completeness
from ..domain.geo import distance_between
from ..domain.liker_filters import (
    LikerFacts,
    LikerFilters,
    collect_occupations,
    matches_liker_filters,
)
from ..domain.profiles import ProfileRecord
from ..domain.scoring import ScoreBreakdown, calculate_score_breakdown
from ..observability import get_logger


@dataclass(frozen=True)
class LikerEntry:
    """A liker annotated with score, distance and trust score."""

    user_id: str
    score: int
    breakdown: ScoreBreakdown
    distance_km: float | None
    completeness: int
    occupation: str | None


@dataclass(frozen=True)
class LikerRanking:
    """Filtered, ranked likers plus the occupations seen before filtering."""

    entries: tuple[LikerEntry, ...]
    available_occupations: tuple[str, ...]
    total_count: int


def _facts(entry: LikerEntry, liker: ProfileRecord) -> LikerFacts:
    return LikerFacts(
        age=liker.age,
        height_cm=liker.height_cm,
        relationship_intent=liker.relationship_intent,
        distance_km=entry.distance_km,
        occupation=liker.occupation,
        completeness=entry.completeness,
        match_score=entry.score,
    )


def rank_likers(
    viewer: ProfileRecord,
    likers: Iterable[ProfileRecord],
    *,
    filters: LikerFilters | None = None,
    now: float | None = None,
    limit: int | None = None,
    log_level: str | None = None,
) -> LikerRanking:
    """Score every liker against the viewer, apply filters and sort by score.

    Likers are not passed through the eligibility filter: they have already
    acted on the viewer. `limit` caps the entries left after sorting and
    filtering; `total_count` and `available_occupations` cover every liker.
    """
    logger = get_logger("match_engine.likers", level=log_level)
    evaluated_at = datetime.now(UTC).timestamp() if now is None else now
    snapshot = viewer.to_snapshot()

    scored: list[tuple[LikerEntry, ProfileRecord]] = []
    for liker in likers:
        distance_km = distance_between(viewer.location, liker.location)
        breakdown = calculate_score_breakdown(
            snapshot, liker.to_snapshot(), distance_km, now=evaluated_at
        )
        entry = LikerEntry(
            user_id=liker.user_id,
            score=breakdown.total,
            breakdown=breakdown,
            distance_km=distance_km,
            completeness=calculate_profile_completeness(liker),
            occupation=liker.occupation,
        )
        scored.append((entry, liker))
    scored.sort(key=lambda pair: pair[0].score, reverse=True)

    visible = [
        entry
        for entry, liker in scored
        if filters is None or matches_liker_filters(_facts(entry, liker), filters)
    ]
    if limit is not None:
        visible = visible[:limit]

    logger.info(
        "Likers for %s: %s total, %s after filters", viewer.user_id, len(scored), len(visible)
    )
    return LikerRanking(
        entries=tuple(visible),
        available_occupations=tuple(collect_occupations(liker.occupation for _, liker in scored)),
        total_count=len(scored),
    )
