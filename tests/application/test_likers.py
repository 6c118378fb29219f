"""Tests for "who liked you" ranking."""

import logging

from match_engine.application.likers import rank_likers
from match_engine.domain.intent import RelationshipIntent
from match_engine.domain.liker_filters import LikerFilters, NumericRange
from tests.support.records import NOW, make_record

RI = RelationshipIntent


def _viewer():
    return make_record(
        "viewer",
        interested_in=frozenset({"female"}),
        relationship_intent=RI.LONG_TERM,
    )


def _likers():
    return [
        make_record("weak", relationship_intent=RI.CASUAL, occupation="Chef", location=None),
        make_record("strong", relationship_intent=RI.LONG_TERM, occupation="Nurse"),
        # Likers skip the eligibility filter even when intents clash.
        make_record("clash", gender="male", relationship_intent=RI.HOOKUPS, occupation="Nurse"),
    ]


def test_rank_likers_sorts_by_score_without_eligibility_filter() -> None:
    ranking = rank_likers(_viewer(), _likers(), now=NOW)

    assert [entry.user_id for entry in ranking.entries] == ["strong", "clash", "weak"]
    assert ranking.entries[0].score == 100
    assert ranking.entries[1].score == 70
    assert ranking.entries[2].score == 50
    assert ranking.total_count == 3


def test_rank_likers_annotates_completeness_and_distance() -> None:
    ranking = rank_likers(_viewer(), _likers(), now=NOW)
    by_id = {entry.user_id: entry for entry in ranking.entries}

    assert by_id["strong"].completeness == 100
    assert by_id["strong"].distance_km == 0.0
    assert by_id["weak"].completeness == 75
    assert by_id["weak"].distance_km is None


def test_rank_likers_applies_filters() -> None:
    filters = LikerFilters(
        occupations=frozenset({"Nurse"}),
        match_score_range=NumericRange(80, 100),
    )

    ranking = rank_likers(_viewer(), _likers(), filters=filters, now=NOW)

    assert [entry.user_id for entry in ranking.entries] == ["strong"]
    assert ranking.total_count == 3


def test_available_occupations_ignore_filters() -> None:
    filters = LikerFilters(occupations=frozenset({"Nurse"}))

    ranking = rank_likers(_viewer(), _likers(), filters=filters, now=NOW)

    assert ranking.available_occupations == ("Chef", "Nurse")


def test_rank_likers_limit() -> None:
    ranking = rank_likers(_viewer(), _likers(), now=NOW, limit=2)

    assert [entry.user_id for entry in ranking.entries] == ["strong", "clash"]



def test_rank_likers_limit_applies_after_filters() -> None:
    filters = LikerFilters(occupations=frozenset({"Chef"}))

    ranking = rank_likers(_viewer(), _likers(), filters=filters, now=NOW, limit=1)

    assert [entry.user_id for entry in ranking.entries] == ["weak"]
    assert ranking.total_count == 3
    assert ranking.available_occupations == ("Chef", "Nurse")


def test_rank_likers_applies_log_level() -> None:
    rank_likers(_viewer(), _likers(), now=NOW, log_level="ERROR")

    assert logging.getLogger("match_engine.likers").level == logging.ERROR

    rank_likers(_viewer(), _likers(), now=NOW, log_level="INFO")

    assert logging.getLogger("match_engine.likers").level == logging.INFO

def test_rank_likers_empty() -> None:
    ranking = rank_likers(_viewer(), [], now=NOW)

    assert ranking.entries == ()
    assert ranking.available_occupations == ()
    assert ranking.total_count == 0
