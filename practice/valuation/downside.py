"""Downside (opportunity cost) and expected value.

Downside is what committing ``timeline_years`` of effort costs at a given
annual salary. Figures are undecorated numbers in the salary's currency.
"""

from __future__ import annotations

import math

from practice.types import Bet


def _is_number(value: float | None) -> bool:
    return value is not None and not isinstance(value, bool) and math.isfinite(value)


def is_overridden_downside(bet: Bet) -> bool:
    return _is_number(bet.downside_override)


def calculate_downside(timeline_years: float | None, annual_salary: float | None) -> float | None:
    """``timeline_years × annual_salary``, or None if either is missing or zero."""
    if not _is_number(timeline_years) or not _is_number(annual_salary):
        return None
    if timeline_years == 0 or annual_salary == 0:
        return None
    return timeline_years * annual_salary


def effective_downside(
    bet: Bet,
    timeline_years: float | None,
    annual_salary: float | None,
) -> float | None:
    """Manual override if set, else the opportunity cost, else None."""
    if is_overridden_downside(bet):
        return float(bet.downside_override)
    return calculate_downside(timeline_years, annual_salary)


def expected_value(upside_multiplier: float | None, downside: float | None) -> float | None:
    """Monetary upside: ``upside_multiplier × downside``.

    Returns None if either input is missing.
    """
    if not _is_number(upside_multiplier) or not _is_number(downside):
        return None
    return upside_multiplier * downside
