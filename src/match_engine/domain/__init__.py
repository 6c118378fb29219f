"""Domain modules for the match engine."""

from .eligibility import is_eligible
from .scoring import ScoreBreakdown, calculate_match_score, calculate_score_breakdown

__all__ = ["ScoreBreakdown", "calculate_match_score", "calculate_score_breakdown", "is_eligible"]
