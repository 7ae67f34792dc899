"""Numeric helpers shared by the scoring and forecast modules.

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
scores and confidences are rounded half-up so that results match what users
see in the UI.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, halves away from zero."""
    # Floats this large carry no fractional digits; quantize would overflow
    # the decimal context precision.
    if not math.isfinite(value) or abs(value) >= 1e15:
        return value
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_step(value: float, step: float) -> float:
    """Round ``value`` half-up to the nearest multiple of ``step``."""
    if step <= 0:
        return value
    return round_half_up(value / step) * step


def finite_or(value: float | None, default: float) -> float:
    """Return ``value`` unless it is missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return default
    try:
        if not math.isfinite(value):
            return default
    except TypeError:
        return default
    return value
