"""Kelly-inspired bet ranking score.

    score = (upside_multiplier × confidence / 100) / timeline_years

Higher upside and confidence raise the score; a longer timeline discounts
it. The name borrows from the Kelly criterion but the formula is a ranking
heuristic, not a derivation of it.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from practice.config import DEFAULT_SCORING, ScoringConfig
from practice.evidence.timeline import bet_timeline_years, parse_timeline_years
from practice.numeric import finite_or, round_half_up
from practice.types import Action, Belief, Bet, BetValuation, ScoreColor, TimelineSource
from practice.valuation.downside import effective_downside, expected_value, is_overridden_downside
from practice.valuation.upside import effective_confidence, effective_upside_multiplier, is_computed_confidence

logger = logging.getLogger(__name__)


def resolve_timeline(
    bet: Bet,
    linked_actions: Sequence[Action] | None = None,
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> tuple[float, TimelineSource]:
    """Timeline in years from linked actions, or from the bet's text.

    The result is always a positive divisor: an unknown (zero) timeline
    becomes ``config.default_timeline_years`` and anything shorter than
    ``config.min_score_timeline_years`` is raised to it.
    """
    if linked_actions:
        years = bet_timeline_years(linked_actions, config=config)
        source: TimelineSource = "actions"
    else:
        years = parse_timeline_years(bet.timeline, config=config)
        source = "text"

    years = finite_or(years, config.default_timeline_years)
    if years <= 0:
        years = config.default_timeline_years
    return max(years, config.min_score_timeline_years), source


def _score(multiplier: float, confidence: float, timeline_years: float) -> float:
    raw = (multiplier * (confidence / 100)) / timeline_years
    if not math.isfinite(raw):
        logger.debug(f"Non-finite score from multiplier={multiplier} confidence={confidence}, using 0")
        return 0.0
    return round_half_up(raw, 2)


def bet_score(
    bet: Bet,
    linked_actions: Sequence[Action] | None = None,
    linked_beliefs: Sequence[Belief] | None = None,
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Rank a bet by risk- and time-adjusted upside.

    Args:
        bet: The bet to score
        linked_actions: Actions linked to the bet; when present they define the timeline
        linked_beliefs: Beliefs linked to the bet (accepted for call-site symmetry;
            their influence arrives through ``bet.computed_confidence``)
        config: Scoring constants

    Returns:
        Score rounded to 2 decimals. Always finite.
    """
    confidence = effective_confidence(bet, config=config)
    timeline_years, _ = resolve_timeline(bet, linked_actions, config=config)
    multiplier = effective_upside_multiplier(bet, timeline_years, confidence, config=config)
    return _score(multiplier, confidence, timeline_years)


def score_label(score: float, *, config: ScoringConfig = DEFAULT_SCORING) -> str:
    """Excellent / Strong / Moderate / Weak / Poor."""
    for threshold, label in config.label_bands:
        if score >= threshold:
            return label
    return config.bottom_label


def score_color(score: float, *, config: ScoringConfig = DEFAULT_SCORING) -> ScoreColor:
    for threshold, color in config.color_bands:
        if score >= threshold:
            return color
    return config.bottom_color


def value_bet(
    bet: Bet,
    linked_actions: Sequence[Action] | None = None,
    linked_beliefs: Sequence[Belief] | None = None,
    annual_salary: float | None = None,
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> BetValuation:
    """Every derived figure for a bet, computed from one resolved timeline.

    Downside and expected value are None when there is no override and no
    salary to price the timeline with.
    """
    confidence = effective_confidence(bet, config=config)
    timeline_years, timeline_source = resolve_timeline(bet, linked_actions, config=config)
    multiplier = effective_upside_multiplier(bet, timeline_years, confidence, config=config)
    downside = effective_downside(bet, timeline_years, annual_salary)
    score = _score(multiplier, confidence, timeline_years)

    return BetValuation(
        confidence=confidence,
        confidence_is_computed=is_computed_confidence(bet),
        timeline_years=timeline_years,
        timeline_source=timeline_source,
        upside_multiplier=multiplier,
        upside_is_auto=bet.upside_multiplier is None,
        downside=downside,
        downside_is_override=is_overridden_downside(bet),
        expected_value=expected_value(multiplier, downside),
        score=score,
        label=score_label(score, config=config),
        color=score_color(score, config=config),
    )
