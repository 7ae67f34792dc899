"""Cached score maintenance.

``Bet.bet_score`` is stored with the bet and recomputed only when one of its
scoring inputs changes. These helpers return new ``Bet`` instances; the
caller persists them.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, Mapping, Sequence

from practice.config import DEFAULT_SCORING, ScoringConfig
from practice.evidence.confidence import weighted_confidence
from practice.types import Action, Belief, Bet
from practice.valuation.scoring import bet_score

logger = logging.getLogger(__name__)

SCORING_FIELDS = frozenset({"upside", "upside_multiplier", "confidence", "timeline"})


def needs_rescore(updates: Mapping[str, Any]) -> bool:
    """True if the update touches any input of the bet score."""
    return any(field in updates for field in SCORING_FIELDS)


def apply_bet_update(
    bet: Bet,
    updates: Mapping[str, Any],
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> Bet:
    """Merge ``updates`` into ``bet``, rescoring when a scoring field changed.

    Raises:
        ValueError: If ``updates`` names a field ``Bet`` does not have
    """
    known = {f.name for f in dataclasses.fields(Bet)}
    unknown = sorted(set(updates) - known)
    if unknown:
        raise ValueError(f"Unknown bet fields: {', '.join(unknown)}")

    merged = dataclasses.replace(bet, **updates)
    if needs_rescore(updates):
        score = bet_score(merged, config=config)
        logger.debug(f"Rescored bet {bet.id}: {bet.bet_score} -> {score}")
        merged = dataclasses.replace(merged, bet_score=score)
    return merged


def refresh_bet(
    bet: Bet,
    beliefs: Sequence[Belief],
    actions: Sequence[Action],
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> Bet:
    """Recompute a bet's computed confidence and cached score from its evidence."""
    computed = weighted_confidence(beliefs, actions, config=config)
    refreshed = dataclasses.replace(bet, computed_confidence=computed)
    score = bet_score(refreshed, actions, beliefs, config=config)
    return dataclasses.replace(refreshed, bet_score=score)


def rank_bets(bets: Iterable[Bet]) -> list[Bet]:
    """Order bets by cached score, highest first; unscored bets last."""
    return sorted(bets, key=lambda b: (b.bet_score is None, -(b.bet_score or 0.0)))
