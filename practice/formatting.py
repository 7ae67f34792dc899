"""Display formatting for monetary figures.

Examples: 1_500_000 → "$1.5M", 150_000 → "$150k", 950 → "$950", None → "-".
"""

from __future__ import annotations

from practice.numeric import round_half_up

MISSING = "-"


def _compact(abs_value: float) -> str:
    if abs_value >= 1_000_000:
        return f"${round_half_up(abs_value / 1_000_000, 1):.1f}M"
    if abs_value >= 1_000:
        return f"${int(round_half_up(abs_value / 1_000))}k"
    return f"${int(round_half_up(abs_value))}"


def format_currency(value: float | None) -> str:
    if value is None:
        return MISSING
    return _compact(abs(value))


def format_downside(value: float | None, show_negative: bool = False) -> str:
    """Like ``format_currency``, optionally prefixed with "-" to read as a loss."""
    if value is None:
        return MISSING
    prefix = "-" if show_negative else ""
    return f"{prefix}{_compact(abs(value))}"
