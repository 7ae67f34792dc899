"""Look-back comparison point for a metric series.

Series are ordered newest first, as they come out of the store.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Sequence

from practice.types import Observation, Period

YTD = "YTD"
STANDARD_PERIODS: tuple[Period, ...] = (30, 60, 90, YTD)


def as_date(value: date | datetime) -> date:
    """Calendar date of a date or datetime (datetimes are read in UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def today(now: date | datetime | None = None) -> date:
    if now is None:
        return datetime.now(timezone.utc).date()
    return as_date(now)


def parse_period(period: Period | str) -> Period:
    """Normalize a period selector: 30, "60", "ytd" → 30, 60, "YTD".

    Raises:
        ValueError: If the selector is neither "YTD" nor a positive day count
    """
    if isinstance(period, str):
        text = period.strip()
        if text.upper() == YTD:
            return YTD
        if not text.isdigit():
            raise ValueError(f"Unknown period: {period!r}")
        period = int(text)
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise ValueError(f"Unknown period: {period!r}")
    return period


def period_cutoff(period: Period | str, now: date | datetime | None = None) -> date:
    """Oldest date a comparison reading may have: ``now - period`` or Jan 1."""
    period = parse_period(period)
    current = today(now)
    if period == YTD:
        return date(current.year, 1, 1)
    return current - timedelta(days=period)


def comparison_entry(
    series: Sequence[Observation],
    period: Period | str,
    now: date | datetime | None = None,
) -> Observation | None:
    """Reading to compare the latest value against.

    Walks the newest-first series and returns the first reading dated on or
    before the period cutoff. Rolling windows (30/60/90 days) fall back to the
    oldest reading when none is old enough; "YTD" does not, since a reading
    from inside the year cannot stand in for the year's starting point.

    Returns None for series shorter than two readings.
    """
    if len(series) < 2:
        return None

    period = parse_period(period)
    cutoff = period_cutoff(period, now)

    for entry in series:
        if as_date(entry.date) <= cutoff:
            return entry

    if period == YTD:
        return None

    oldest = series[-1]
    if oldest is series[0]:
        return None
    return oldest
