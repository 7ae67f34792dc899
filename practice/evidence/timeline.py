"""Commitment durations and timeline parsing.

A bet's timeline is the total time committed through its actions. Older bets
only carry a free-text description ("5-7 Years", "18 months", "Ongoing"),
which is parsed as a fallback when no actions are linked.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from practice.config import DEFAULT_SCORING, ScoringConfig
from practice.numeric import finite_or
from practice.types import Action

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12

PERPETUAL_KEYWORDS = ("ongoing", "perpetual", "forever")

_MONTHS_RE = re.compile(r"(\d+)(?:\s*-\s*(\d+))?\s*months?")
_YEARS_RE = re.compile(r"(\d+)(?:\s*-\s*(\d+))?\s*years?")
_PLAIN_NUMBER_RE = re.compile(r"^(\d+)$")


def _action_days(action: Action, config: ScoringConfig) -> float:
    return max(0.0, finite_or(action.duration_days, config.default_action_days))


def belief_duration(
    belief_id: str,
    actions: Sequence[Action],
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Total days of the actions testing a belief (0 when none are linked)."""
    return sum(_action_days(a, config) for a in actions if a.belief_id == belief_id)


def bet_timeline_years(
    actions: Sequence[Action],
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Sum of linked action durations, in years.

    Returns 0 for an empty list. Callers must read 0 as "unknown", not as an
    instant commitment.
    """
    if not actions:
        return 0.0
    total_days = sum(_action_days(a, config) for a in actions)
    return total_days / DAYS_PER_YEAR


def _range_midpoint(match: re.Match) -> float:
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    return (low + high) / 2


def parse_timeline_years(
    timeline: str | None,
    *,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """Parse a free-text timeline description into years.

    Checked in order:
        - "ongoing" / "perpetual" / "forever": ``config.perpetual_timeline_years``
        - months, single or range ("18 months", "6-12 months"): midpoint / 12
        - years, single or range ("2 years", "5-7 Years"): midpoint
        - a bare integer ("3"): that many years
        - anything else, including empty or None: ``config.default_timeline_years``

    Always finite and positive.
    """
    if not timeline or not isinstance(timeline, str):
        return config.default_timeline_years

    lower = timeline.lower()

    if any(keyword in lower for keyword in PERPETUAL_KEYWORDS):
        return config.perpetual_timeline_years

    try:
        months = _MONTHS_RE.search(lower)
        if months:
            years = _range_midpoint(months) / MONTHS_PER_YEAR
        else:
            years_match = _YEARS_RE.search(lower)
            if years_match:
                years = _range_midpoint(years_match)
            else:
                plain = _PLAIN_NUMBER_RE.match(lower.strip())
                if not plain:
                    logger.debug(f"Unparseable timeline {timeline!r}, using default")
                    return config.default_timeline_years
                years = float(plain.group(1))
    except (ValueError, OverflowError):
        logger.debug(f"Timeline number out of range in {timeline[:40]!r}, using default")
        return config.default_timeline_years

    # "0 months" and friends carry no information
    if not math.isfinite(years) or years <= 0:
        return config.default_timeline_years
    return years
