"""Metric trends and goal forecasting.

Comparison points for look-back windows, period deltas, goal progress and a
constant-rate arrival forecast.
"""

from .comparison import STANDARD_PERIODS, YTD, comparison_entry, parse_period, period_cutoff
from .delta import range_status, trend_delta
from .forecast import forecast, format_target_date, time_to_goal_label
from .progress import goal_progress, is_goal_met
from .summary import summarize_goal

__all__ = [
    # Comparison
    "STANDARD_PERIODS",
    "YTD",
    "comparison_entry",
    "parse_period",
    "period_cutoff",
    # Delta
    "range_status",
    "trend_delta",
    # Progress
    "goal_progress",
    "is_goal_met",
    # Forecast
    "forecast",
    "format_target_date",
    "time_to_goal_label",
    "summarize_goal",
]
