"""Tests for the relationship-intent vocabulary and tier table."""

from itertools import product

import pytest

from match_engine.domain.intent import (
    HARD_INCOMPATIBLE_PAIRS,
    INTENT_TIERS,
    IntentTier,
    RelationshipIntent,
    intent_pair,
    intent_tier,
    is_hard_incompatible,
    parse_relationship_intent,
)

RI = RelationshipIntent


def test_tier_table_covers_every_unordered_pair() -> None:
    # 5 identical pairs + 10 distinct pairs
    assert len(INTENT_TIERS) == 15
    for a, b in product(RelationshipIntent, repeat=2):
        assert intent_pair(a, b) in INTENT_TIERS


@pytest.mark.parametrize(("a", "b"), list(product(RelationshipIntent, repeat=2)))
def test_tier_lookup_is_symmetric(a: RelationshipIntent, b: RelationshipIntent) -> None:
    assert intent_tier(a, b) == intent_tier(b, a)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (RI.CASUAL, RI.CASUAL, IntentTier.EXACT),
        (RI.LONG_TERM, RI.UNSURE, IntentTier.COMPATIBLE),
        (RI.CASUAL, RI.UNSURE, IntentTier.COMPATIBLE),
        (RI.HOOKUPS, RI.UNSURE, IntentTier.COMPATIBLE),
        (RI.HOOKUPS, RI.CASUAL, IntentTier.COMPATIBLE),
        (RI.FRIENDSHIP, RI.UNSURE, IntentTier.COMPATIBLE),
        (RI.LONG_TERM, RI.CASUAL, IntentTier.WEAK),
        (RI.LONG_TERM, RI.FRIENDSHIP, IntentTier.WEAK),
        (RI.CASUAL, RI.FRIENDSHIP, IntentTier.WEAK),
        (RI.HOOKUPS, RI.LONG_TERM, IntentTier.INCOMPATIBLE),
        (RI.HOOKUPS, RI.FRIENDSHIP, IntentTier.INCOMPATIBLE),
    ],
)
def test_tier_assignment(
    a: RelationshipIntent, b: RelationshipIntent, expected: IntentTier
) -> None:
    assert intent_tier(a, b) is expected


def test_tier_is_none_when_either_intent_absent() -> None:
    assert intent_tier(None, RI.CASUAL) is None
    assert intent_tier(RI.CASUAL, None) is None
    assert intent_tier(None, None) is None


def test_hard_incompatible_pairs() -> None:
    assert HARD_INCOMPATIBLE_PAIRS == {
        intent_pair(RI.HOOKUPS, RI.LONG_TERM),
        intent_pair(RI.HOOKUPS, RI.FRIENDSHIP),
    }
    assert is_hard_incompatible(RI.LONG_TERM, RI.HOOKUPS)
    assert is_hard_incompatible(RI.HOOKUPS, RI.FRIENDSHIP)
    assert not is_hard_incompatible(RI.HOOKUPS, RI.UNSURE)
    assert not is_hard_incompatible(RI.HOOKUPS, None)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("long_term", RI.LONG_TERM),
        ("unsure", RI.UNSURE),
        (RI.CASUAL, RI.CASUAL),
        ("Long Term", None),
        ("LONG_TERM", None),
        ("marriage", None),
        ("", None),
        (None, None),
        (3, None),
    ],
)
def test_parse_relationship_intent(raw: object, expected: RelationshipIntent | None) -> None:
    assert parse_relationship_intent(raw) is expected


def test_labels() -> None:
    assert RI.LONG_TERM.label == "Long Term"
    assert [intent.label for intent in RelationshipIntent] == [
        "Long Term",
        "Casual",
        "Hookups",
        "Friendship",
        "Unsure",
    ]
