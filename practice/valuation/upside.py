"""Confidence and upside multiplier resolution.

The auto upside is a heuristic pricing curve, not a formal option-pricing
model:

    upside = base × risk_premium × time_premium
    risk_premium = (100 / clamp(confidence, 10, 100)) ** 0.5
        50% confidence → 1.41x, 70% → 1.20x, 90% → 1.05x
    time_premium = max(timeline_years, 0.1) ** 0.3
        0.5 years → 0.81x, 1 year → 1.0x, 3 years → 1.39x, 5 years → 1.62x

Its shape is a product decision. Do not move it toward a textbook Kelly
formula without sign-off.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from practice.config import DEFAULT_SCORING, ScoringConfig
from practice.numeric import finite_or, round_to_step
from practice.types import Bet

# Multiplier used in place of a zero or negative manual upside
INVALID_UPSIDE_FALLBACK = 1.0


@dataclass(frozen=True)
class UpsideOption:
    label: str
    multiplier: float


UPSIDE_OPTIONS: tuple[UpsideOption, ...] = (
    UpsideOption(label="Linear (1-2x)", multiplier=1.5),
    UpsideOption(label="Moderate (3-5x)", multiplier=4.0),
    UpsideOption(label="Strong (10x)", multiplier=10.0),
    UpsideOption(label="Outsized (50x)", multiplier=50.0),
    UpsideOption(label="Moonshot (100x+)", multiplier=100.0),
)


def upside_multiplier_for(label: str | None) -> float | None:
    """Map an upside label ("Moonshot", "Strong (10x)") to its multiplier.

    Matches on the leading word, case-insensitively. Legacy free-text labels
    return None.
    """
    if not label:
        return None
    words = label.strip().split()
    if not words:
        return None
    head = words[0].lower()
    for option in UPSIDE_OPTIONS:
        if option.label.split()[0].lower() == head:
            return option.multiplier
    return None


def is_computed_confidence(bet: Bet) -> bool:
    return bet.computed_confidence is not None


def effective_confidence(bet: Bet, *, config: ScoringConfig = DEFAULT_SCORING) -> float:
    """Computed confidence if present, else the manual one, else the default.

    Always within [0, 100].
    """
    if bet.computed_confidence is not None:
        confidence = finite_or(bet.computed_confidence, config.default_confidence)
    else:
        confidence = finite_or(bet.confidence, config.default_confidence)
    return max(0.0, min(float(confidence), 100.0))


def auto_upside(
    timeline_years: float,
    confidence: float,
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Derive an upside multiplier from timeline and confidence.

    Lower confidence and longer timelines both demand a larger upside. The
    result is rounded to the nearest ``config.upside_step`` (0.5x).

    Examples:
        70% confidence, 0.5 years: 5 × 1.20 × 0.81 → 5.0x
        60% confidence, 1 year:    5 × 1.29 × 1.00 → 6.5x
        50% confidence, 3 years:   5 × 1.41 × 1.39 → 10.0x
    """
    valid_timeline = max(finite_or(timeline_years, config.min_timeline_years), config.min_timeline_years)
    valid_confidence = finite_or(confidence, config.default_confidence)
    valid_confidence = max(min(valid_confidence, config.max_confidence), config.min_confidence)

    risk_premium = math.pow(100 / valid_confidence, config.risk_premium_exponent)
    time_premium = math.pow(valid_timeline, config.time_premium_exponent)

    upside = config.base_multiplier * risk_premium * time_premium
    return round_to_step(upside, config.upside_step)


def effective_upside_multiplier(
    bet: Bet,
    timeline_years: float,
    confidence: float,
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Manual multiplier when valid, auto upside when absent.

    A manual multiplier of zero or below (or a non-finite one) is replaced by
    ``INVALID_UPSIDE_FALLBACK`` rather than rejected.
    """
    if bet.upside_multiplier is None:
        return auto_upside(timeline_years, confidence, config=config)
    multiplier = finite_or(bet.upside_multiplier, INVALID_UPSIDE_FALLBACK)
    if multiplier <= 0:
        return INVALID_UPSIDE_FALLBACK
    return float(multiplier)
