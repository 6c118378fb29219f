"""Hard filters deciding whether a candidate may be shown to a viewer at all.

Distance is not a criterion here: out-of-radius candidates stay
eligible and simply earn no distance points when scored.
"""

from __future__ import annotations

from .intent import is_hard_incompatible
from .profiles import FilterCandidate, FilterSubject


def passes_gender_preference(viewer: FilterSubject, candidate: FilterCandidate) -> bool:
    """An empty preference set means no preference: every gender passes."""
    if not viewer.interested_in:
        return True
    return candidate.gender in viewer.interested_in


def passes_intent_compatibility(viewer: FilterSubject, candidate: FilterCandidate) -> bool:
    return not is_hard_incompatible(viewer.relationship_intent, candidate.relationship_intent)


def is_eligible(viewer: FilterSubject, candidate: FilterCandidate) -> bool:
    """Apply the hard filters in order, stopping at the first failure."""
    if not passes_gender_preference(viewer, candidate):
        return False
    if not passes_intent_compatibility(viewer, candidate):
        return False
    return True
