"""Goal arrival forecast.

The model is a constant-rate linear extrapolation: the average daily change
observed between the comparison reading and the current one is projected
forward until it reaches the goal. No smoothing, regression or seasonality
is applied.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta

from practice.config import DEFAULT_FORECAST, ForecastConfig
from practice.numeric import round_half_up
from practice.trends.comparison import today
from practice.trends.progress import is_goal_met
from practice.types import ForecastResult

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30

GOAL_MET_LABEL = "Goal met"
UNDER_A_WEEK_LABEL = "<1 week"


def _is_number(value: float | None) -> bool:
    return value is not None and not isinstance(value, bool) and math.isfinite(value)


def _approx(count: float, unit: str) -> str:
    n = int(round_half_up(count))
    return f"~{n} {unit}" if n == 1 else f"~{n} {unit}s"


def time_to_goal_label(days: float, *, config: ForecastConfig = DEFAULT_FORECAST) -> str:
    """Human bucket for an ETA: "<1 week", "~N weeks" or "~N months"."""
    if days < DAYS_PER_WEEK:
        return UNDER_A_WEEK_LABEL
    if days < config.week_bucket_days:
        return _approx(days / DAYS_PER_WEEK, "week")
    return _approx(days / DAYS_PER_MONTH, "month")


def format_target_date(value: date) -> str:
    """Calendar label such as "Nov 17, 2026"."""
    return f"{value:%b} {value.day}, {value.year}"


def forecast(
    current: float | None,
    goal: float | None,
    comparison: float | None,
    days_between: float | None,
    higher_is_better: bool | None,
    now: date | datetime | None = None,
    *,
    config: ForecastConfig = DEFAULT_FORECAST,
) -> ForecastResult | None:
    """Project when ``current`` reaches ``goal`` at the observed daily rate.

    Args:
        current: Latest reading
        goal: Target value
        comparison: Earlier reading the rate is measured from
        days_between: Days between the comparison reading and the latest one
        higher_is_better: Direction of improvement (None = unknown)
        now: Reference date for the target date (defaults to today, UTC)
        config: Forecast constants

    Returns:
        ``ForecastResult(is_already_met=True)`` when the goal is already met,
        a result with an ETA bucket and target date otherwise, or None when
        there is not enough data, the trend is flat or moving away from the
        goal, or the ETA is beyond ``config.horizon_days``
    """
    if not all(_is_number(v) for v in (current, goal, comparison, days_between)):
        return None
    if days_between <= 0 or higher_is_better is None:
        return None

    if is_goal_met(current, goal, higher_is_better):
        return ForecastResult(is_already_met=True, time_to_goal_label=GOAL_MET_LABEL)

    daily_rate = (current - comparison) / days_between
    toward_goal = daily_rate > 0 if higher_is_better else daily_rate < 0
    if not toward_goal or abs(daily_rate) < config.min_daily_rate:
        logger.debug(f"No forecast: daily rate {daily_rate:.6f} is not moving toward {goal}")
        return None

    days_to_goal = abs(goal - current) / abs(daily_rate)
    if days_to_goal > config.horizon_days:
        logger.debug(f"No forecast: {days_to_goal:.0f} days exceeds the {config.horizon_days:.0f} day horizon")
        return None

    target = today(now) + timedelta(days=round_half_up(days_to_goal))
    return ForecastResult(
        is_already_met=False,
        time_to_goal_label=time_to_goal_label(days_to_goal, config=config),
        target_date_label=format_target_date(target),
        days_to_goal=days_to_goal,
        target_date=target,
    )
