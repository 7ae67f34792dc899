"""Bet valuation.

Confidence and upside resolution, downside and expected value, the ranking
score and its cached maintenance.
"""

from .downside import calculate_downside, effective_downside, expected_value, is_overridden_downside
from .recalc import SCORING_FIELDS, apply_bet_update, needs_rescore, rank_bets, refresh_bet
from .scoring import bet_score, resolve_timeline, score_color, score_label, value_bet
from .upside import (
    INVALID_UPSIDE_FALLBACK,
    UPSIDE_OPTIONS,
    UpsideOption,
    auto_upside,
    effective_confidence,
    effective_upside_multiplier,
    is_computed_confidence,
    upside_multiplier_for,
)

__all__ = [
    # Upside
    "INVALID_UPSIDE_FALLBACK",
    "UPSIDE_OPTIONS",
    "UpsideOption",
    "auto_upside",
    "effective_confidence",
    "effective_upside_multiplier",
    "is_computed_confidence",
    "upside_multiplier_for",
    # Downside
    "calculate_downside",
    "effective_downside",
    "expected_value",
    "is_overridden_downside",
    # Scoring
    "bet_score",
    "resolve_timeline",
    "score_color",
    "score_label",
    "value_bet",
    # Recalculation
    "SCORING_FIELDS",
    "apply_bet_update",
    "needs_rescore",
    "rank_bets",
    "refresh_bet",
]
