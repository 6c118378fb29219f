"""Relationship-intent vocabulary and pairwise compatibility tiers.

Tiers live in a single table keyed by the unordered pair of intents, so a
lookup is symmetric by construction and every pair of the vocabulary has an
explicit entry.

Usage example:
    from match_engine.domain.intent import IntentTier, RelationshipIntent, intent_tier

    tier = intent_tier(RelationshipIntent.LONG_TERM, RelationshipIntent.UNSURE)
    assert tier is IntentTier.COMPATIBLE
"""

from __future__ import annotations

from enum import StrEnum
from itertools import combinations_with_replacement
from types import MappingProxyType


class RelationshipIntent(StrEnum):
    """A user's stated dating goal."""

    LONG_TERM = "long_term"
    CASUAL = "casual"
    HOOKUPS = "hookups"
    FRIENDSHIP = "friendship"
    UNSURE = "unsure"

    @property
    def label(self) -> str:
        return INTENT_LABELS[self]


class IntentTier(StrEnum):
    """Compatibility level of two intents."""

    EXACT = "exact"
    COMPATIBLE = "compatible"
    WEAK = "weak"
    INCOMPATIBLE = "incompatible"


INTENT_LABELS = MappingProxyType(
    {
        RelationshipIntent.CASUAL: "Casual",
        RelationshipIntent.LONG_TERM: "Long Term",
        RelationshipIntent.HOOKUPS: "Hookups",
        RelationshipIntent.FRIENDSHIP: "Friendship",
        RelationshipIntent.UNSURE: "Unsure",
    }
)

TIER_POINTS = MappingProxyType(
    {
        IntentTier.EXACT: 30,
        IntentTier.COMPATIBLE: 20,
        IntentTier.WEAK: 10,
        IntentTier.INCOMPATIBLE: 0,
    }
)

IntentPair = frozenset[RelationshipIntent]


def intent_pair(a: RelationshipIntent, b: RelationshipIntent) -> IntentPair:
    """Canonical unordered key for two intents."""
    return frozenset((a, b))


_I = RelationshipIntent

_COMPATIBLE_PAIRS = (
    intent_pair(_I.LONG_TERM, _I.UNSURE),
    intent_pair(_I.CASUAL, _I.UNSURE),
    intent_pair(_I.HOOKUPS, _I.UNSURE),
    intent_pair(_I.HOOKUPS, _I.CASUAL),
    intent_pair(_I.FRIENDSHIP, _I.UNSURE),
)

_WEAK_PAIRS = (
    intent_pair(_I.LONG_TERM, _I.CASUAL),
    intent_pair(_I.LONG_TERM, _I.FRIENDSHIP),
    intent_pair(_I.CASUAL, _I.FRIENDSHIP),
)

# Pairs that exclude a candidate from the feed outright.
HARD_INCOMPATIBLE_PAIRS = frozenset(
    {
        intent_pair(_I.HOOKUPS, _I.LONG_TERM),
        intent_pair(_I.HOOKUPS, _I.FRIENDSHIP),
    }
)


def _build_tier_table() -> MappingProxyType[IntentPair, IntentTier]:
    table: dict[IntentPair, IntentTier] = {}
    for a, b in combinations_with_replacement(RelationshipIntent, 2):
        pair = intent_pair(a, b)
        if a == b:
            table[pair] = IntentTier.EXACT
        elif pair in _COMPATIBLE_PAIRS:
            table[pair] = IntentTier.COMPATIBLE
        elif pair in _WEAK_PAIRS:
            table[pair] = IntentTier.WEAK
        else:
            table[pair] = IntentTier.INCOMPATIBLE
    return MappingProxyType(table)


INTENT_TIERS = _build_tier_table()


def intent_tier(
    a: RelationshipIntent | None, b: RelationshipIntent | None
) -> IntentTier | None:
    """Return the tier for two intents, or None when either is absent."""
    if a is None or b is None:
        return None
    return INTENT_TIERS[intent_pair(a, b)]


def is_hard_incompatible(a: RelationshipIntent | None, b: RelationshipIntent | None) -> bool:
    """True when both intents are present and form an excluded pair."""
    if a is None or b is None:
        return False
    return intent_pair(a, b) in HARD_INCOMPATIBLE_PAIRS


def parse_relationship_intent(value: object) -> RelationshipIntent | None:
    """Map a raw value onto the vocabulary; unrecognised values are treated as absent."""
    if isinstance(value, RelationshipIntent):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return RelationshipIntent(value)
    except ValueError:
        return None
