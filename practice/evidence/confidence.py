"""Weighted confidence from a bet's linked beliefs and actions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from practice.config import DEFAULT_SCORING, ScoringConfig
from practice.numeric import finite_or, round_half_up
from practice.types import Action, Belief


@dataclass(frozen=True)
class EvidenceItem:
    """One confidence reading and the weight it carries."""

    confidence: float  # 0-100
    weight: float  # duration in days


def evidence_items(
    beliefs: Sequence[Belief],
    actions: Sequence[Action],
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[EvidenceItem]:
    """Flatten beliefs and actions into weighted confidence readings.

    Beliefs default to ``config.default_belief_days`` of weight, actions to
    ``config.default_action_days``. Negative durations carry no weight.
    """
    items: list[EvidenceItem] = []
    for belief in beliefs:
        items.append(
            EvidenceItem(
                confidence=finite_or(belief.confidence, config.default_confidence),
                weight=max(0.0, finite_or(belief.duration_days, config.default_belief_days)),
            )
        )
    for action in actions:
        items.append(
            EvidenceItem(
                confidence=finite_or(action.confidence, config.default_confidence),
                weight=max(0.0, finite_or(action.duration_days, config.default_action_days)),
            )
        )
    return items


def weighted_confidence(
    beliefs: Sequence[Belief],
    actions: Sequence[Action],
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> int | None:
    """Duration-weighted average confidence of the evidence.

    Args:
        beliefs: Beliefs linked to the bet
        actions: Actions linked to the bet
        config: Scoring constants (default durations and confidence)

    Returns:
        Integer confidence (0-100 for in-range inputs), or None when there is
        no evidence at all

    Edge cases:
        - No beliefs and no actions: None
        - Every weight is zero: plain mean of the confidences
    """
    items = evidence_items(beliefs, actions, config=config)
    if not items:
        return None

    total_weight = sum(item.weight for item in items)
    if total_weight == 0:
        mean = sum(item.confidence for item in items) / len(items)
        return int(round_half_up(mean))

    weighted_sum = sum(item.confidence * item.weight for item in items)
    average = weighted_sum / total_weight
    if not math.isfinite(average):
        # Weights too large to sum: treat them as equal
        average = sum(item.confidence for item in items) / len(items)
    return int(round_half_up(average))
