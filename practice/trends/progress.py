from __future__ import annotations

from practice.config import DEFAULT_FORECAST, ForecastConfig
from practice.numeric import finite_or
from practice.types import GoalProgress


def is_goal_met(current: float, target: float, higher_is_better: bool) -> bool:
    """Whether ``current`` has reached or passed ``target`` in the improving direction."""
    if higher_is_better:
        return current >= target
    return current <= target


def goal_progress(
    current: float | None,
    target: float | None,
    higher_is_better: bool | None,
    *,
    config: ForecastConfig = DEFAULT_FORECAST,
) -> GoalProgress | None:
    """Bucket a metric against its goal: "met", "close" (within 10%) or "far".

    Returns None when either value is missing, non-finite or zero. An unknown direction
    is read as higher-is-better.
    """
    current = finite_or(current, 0.0)
    target = finite_or(target, 0.0)
    if not current or not target:
        return None

    higher = higher_is_better is not False
    if is_goal_met(current, target, higher):
        return "met"

    # Not met, so any gap is on the wrong side of the target
    close = abs(current - target) <= config.close_threshold * abs(target)
    return "close" if close else "far"
