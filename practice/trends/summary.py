from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from practice.config import DEFAULT_FORECAST, ForecastConfig
from practice.trends.comparison import as_date, comparison_entry
from practice.trends.delta import trend_delta
from practice.trends.forecast import forecast
from practice.trends.progress import goal_progress
from practice.types import Goal, GoalSummary, Observation, Period


def summarize_goal(
    series: Sequence[Observation],
    goal: Goal,
    period: Period | str,
    now: date | datetime | None = None,
    *,
    config: ForecastConfig = DEFAULT_FORECAST,
) -> GoalSummary:
    """Comparison, delta, progress and forecast for one goal metric.

    The goal's ``current_value`` is used as the current reading, falling back
    to the newest observation. ``days_between`` is measured between the
    newest observation and the comparison point.
    """
    latest = series[0] if series else None
    comparison = comparison_entry(series, period, now)

    current = goal.current_value
    if current is None and latest is not None:
        current = latest.value

    delta = None
    eta = None
    if latest is not None and comparison is not None:
        delta = trend_delta(latest.value, comparison.value, goal.higher_is_better, config=config)
        days_between = (as_date(latest.date) - as_date(comparison.date)).days
        eta = forecast(
            current,
            goal.target_value,
            comparison.value,
            days_between,
            goal.higher_is_better,
            now,
            config=config,
        )

    return GoalSummary(
        latest=latest,
        comparison=comparison,
        delta=delta,
        progress=goal_progress(current, goal.target_value, goal.higher_is_better, config=config),
        forecast=eta,
    )
