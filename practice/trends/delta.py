"""Period-over-period change and normal-range status for a metric."""

from __future__ import annotations

from practice.config import DEFAULT_FORECAST, ForecastConfig
from practice.numeric import finite_or
from practice.types import RangeStatus, TrendDelta

ARROW_UP = "↑"
ARROW_DOWN = "↓"

NO_CHANGE = TrendDelta(diff=None, improved=None, arrow="", color=None)


def is_improvement(diff: float, higher_is_better: bool | None) -> bool | None:
    """Whether a change moves the metric the right way; None if direction is unknown."""
    if higher_is_better is True:
        return diff > 0
    if higher_is_better is False:
        return diff < 0
    return None


def trend_delta(
    latest: float | None,
    comparison: float | None,
    higher_is_better: bool | None,
    *,
    config: ForecastConfig = DEFAULT_FORECAST,
) -> TrendDelta:
    """Classify the change from ``comparison`` to ``latest``.

    A zero or missing reading on either side counts as "no reading". Changes
    smaller than ``config.noise_threshold`` count as no change. When the
    direction of improvement is unknown the diff is reported without an arrow
    or color.
    """
    latest = finite_or(latest, 0.0)
    comparison = finite_or(comparison, 0.0)
    if latest == 0 or comparison == 0:
        return NO_CHANGE

    diff = latest - comparison
    if abs(diff) < config.noise_threshold:
        return TrendDelta(diff=diff, improved=None, arrow="", color=None)

    improved = is_improvement(diff, higher_is_better)
    if improved is None:
        return TrendDelta(diff=diff, improved=None, arrow="", color=None)

    return TrendDelta(
        diff=diff,
        improved=improved,
        arrow=ARROW_UP if diff > 0 else ARROW_DOWN,
        color="positive" if improved else "negative",
    )


def range_status(value: float | None, low: float | None, high: float | None) -> RangeStatus | None:
    """Where a reading sits relative to its normal range.

    None when the metric has no range or the reading is missing/zero.
    """
    value = finite_or(value, 0.0)
    if low is None or high is None or not value:
        return None
    if value < low:
        return "below"
    if value > high:
        return "above"
    return "within"
