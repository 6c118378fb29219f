"""Feed population: filter a candidate pool, score the survivors, rank them.

Usage example:
    >>> from match_engine.application.feed import build_feed
    >>> entries = build_feed(viewer, pool, excluded_ids={"already-swiped"})
    >>> [entry.user_id for entry in entries[:3]]
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

import pandas as pd

from ..domain.eligibility import is_eligible
from ..domain.geo import distance_between
from ..domain.profiles import ProfileRecord
from ..domain.scoring import ScoreBreakdown, calculate_score_breakdown
from ..observability import get_logger

FEED_COLUMNS = (
    "rank",
    "user_id",
    "score",
    "distance_score",
    "intent_score",
    "interests_score",
    "activity_score",
    "distance_km",
)


@dataclass(frozen=True)
class FeedEntry:
    """One ranked candidate. `breakdown` is None when the candidate was not scored."""

    user_id: str
    score: int
    breakdown: ScoreBreakdown | None
    distance_km: float | None


def build_feed(
    viewer: ProfileRecord,
    pool: Iterable[ProfileRecord],
    *,
    excluded_ids: Iterable[str] = (),
    now: float | None = None,
    limit: int | None = None,
    rng: random.Random | None = None,
    log_level: str | None = None,
) -> list[FeedEntry]:
    """Rank a candidate pool for the viewer.

    Viewers who have chosen neither interests nor an intent get the pool
    unfiltered, unscored and shuffled. Everyone else gets only eligible
    candidates, sorted by score descending (ties keep pool order).

    Args:
        viewer: The viewing user's record.
        pool: Candidate records; the viewer's own record is skipped.
        excluded_ids: Users already swiped on or blocked.
        now: Evaluation instant in epoch seconds; defaults to the current time.
        limit: Maximum number of entries returned.
        rng: Random source for the unranked shuffle.
        log_level: Level for the feed logger; unchanged when None.
    """
    logger = get_logger("match_engine.feed", level=log_level)
    excluded = frozenset(excluded_ids)
    evaluated_at = datetime.now(UTC).timestamp() if now is None else now
    candidates = [
        record
        for record in pool
        if record.user_id != viewer.user_id and record.user_id not in excluded
    ]

    entries: list[FeedEntry] = []
    if not viewer.has_preferences:
        entries = [
            FeedEntry(
                user_id=candidate.user_id,
                score=0,
                breakdown=None,
                distance_km=distance_between(viewer.location, candidate.location),
            )
            for candidate in candidates
        ]
        (rng or random.Random()).shuffle(entries)
    else:
        subject = viewer.to_filter_subject()
        snapshot = viewer.to_snapshot()
        for candidate in candidates:
            if not is_eligible(subject, candidate.to_filter_candidate()):
                continue
            distance_km = distance_between(viewer.location, candidate.location)
            breakdown = calculate_score_breakdown(
                snapshot, candidate.to_snapshot(), distance_km, now=evaluated_at
            )
            entries.append(
                FeedEntry(
                    user_id=candidate.user_id,
                    score=breakdown.total,
                    breakdown=breakdown,
                    distance_km=distance_km,
                )
            )
        entries.sort(key=lambda entry: entry.score, reverse=True)

    if limit is not None:
        entries = entries[:limit]

    logger.info(
        "Feed for %s: %s candidates, %s returned (%s)",
        viewer.user_id,
        len(candidates),
        len(entries),
        "ranked" if viewer.has_preferences else "shuffled",
    )
    return entries


def feed_to_frame(entries: Iterable[FeedEntry]) -> pd.DataFrame:
    """Tabulate feed entries for CSV export, one row per entry in rank order."""
    rows = []
    for rank, entry in enumerate(entries, start=1):
        breakdown = entry.breakdown
        rows.append(
            {
                "rank": rank,
                "user_id": entry.user_id,
                "score": entry.score,
                "distance_score": breakdown.distance_score if breakdown else 0,
                "intent_score": breakdown.intent_score if breakdown else 0,
                "interests_score": breakdown.interests_score if breakdown else 0,
                "activity_score": breakdown.activity_score if breakdown else 0,
                "distance_km": None
                if entry.distance_km is None
                else round(entry.distance_km, 1),
            }
        )
    return pd.DataFrame(rows, columns=list(FEED_COLUMNS))
