"""Tunable constants for scoring and forecasting.

All thresholds here are business-tuned heuristics. They live in frozen
dataclasses so they can be overridden per call (``config=``) or from the
environment (``PRACTICE_*`` variables) without touching the algorithms.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields

logger = logging.getLogger(__name__)

ENV_PREFIX = "PRACTICE_"

# Fallback opportunity-cost rate when the user has not configured one
DEFAULT_ANNUAL_SALARY = 150_000.0

# (threshold, label) pairs, checked top to bottom
DEFAULT_LABEL_BANDS: tuple[tuple[float, str], ...] = (
    (5.0, "Excellent"),
    (3.0, "Strong"),
    (1.0, "Moderate"),
    (0.5, "Weak"),
)
DEFAULT_COLOR_BANDS: tuple[tuple[float, str], ...] = (
    (3.0, "green"),
    (1.0, "yellow"),
)


@dataclass(frozen=True)
class ScoringConfig:
    """Bet valuation constants.

    Attributes:
        base_multiplier: Baseline return expectation for auto upside
        min_confidence: Lower clamp applied to confidence before the risk premium
        max_confidence: Upper clamp applied to confidence before the risk premium
        risk_premium_exponent: Exponent of (100 / confidence)
        time_premium_exponent: Exponent of the timeline in years
        min_timeline_years: Timeline floor used by the auto upside curve
        upside_step: Auto upside is rounded to a multiple of this step
        default_confidence: Confidence used when a bet has none
        default_timeline_years: Parsed timeline for empty/unparseable text
        perpetual_timeline_years: Parsed timeline for "ongoing"-style text
        min_score_timeline_years: Smallest positive timeline used as a score divisor
        default_action_days: Duration assumed for an action without one
        default_belief_days: Duration assumed for a belief without one
        label_bands: Score thresholds for labels, highest first
        bottom_label: Label for scores below every band
        color_bands: Score thresholds for colors, highest first
        bottom_color: Color for scores below every band
    """

    base_multiplier: float = 5.0
    min_confidence: float = 10.0
    max_confidence: float = 100.0
    risk_premium_exponent: float = 0.5
    time_premium_exponent: float = 0.3
    min_timeline_years: float = 0.1
    upside_step: float = 0.5
    default_confidence: float = 50.0
    default_timeline_years: float = 1.0
    perpetual_timeline_years: float = 10.0
    min_score_timeline_years: float = 1 / 365
    default_action_days: int = 30
    default_belief_days: int = 0
    label_bands: tuple[tuple[float, str], ...] = DEFAULT_LABEL_BANDS
    bottom_label: str = "Poor"
    color_bands: tuple[tuple[float, str], ...] = DEFAULT_COLOR_BANDS
    bottom_color: str = "red"

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        """Build a config, overriding scalar fields from ``PRACTICE_*`` variables."""
        return cls(**_env_overrides(cls))


@dataclass(frozen=True)
class ForecastConfig:
    """Trend and forecast constants.

    Attributes:
        noise_threshold: Absolute deltas below this count as "no change"
        close_threshold: Fraction of the target that counts as "close"
        horizon_days: Forecasts further out than this are not reported
        min_daily_rate: Rates below this count as "no measurable progress"
        week_bucket_days: ETAs below this are labelled in weeks, above in months
    """

    noise_threshold: float = 0.1
    close_threshold: float = 0.10
    horizon_days: float = 730.0
    min_daily_rate: float = 1e-6
    week_bucket_days: float = 90.0

    @classmethod
    def from_env(cls) -> "ForecastConfig":
        """Build a config, overriding scalar fields from ``PRACTICE_*`` variables."""
        return cls(**_env_overrides(cls))


def _env_overrides(config_cls: type) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for field in fields(config_cls):
        if field.type not in ("float", "int"):
            continue
        env_name = f"{ENV_PREFIX}{field.name.upper()}"
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        try:
            overrides[field.name] = int(raw) if field.type == "int" else float(raw)
        except ValueError:
            logger.warning(f"Ignoring {env_name}={raw!r}: not a number")
    return overrides


def default_annual_salary() -> float:
    """Annual opportunity-cost rate from ``PRACTICE_ANNUAL_SALARY`` or the default."""
    raw = os.getenv(f"{ENV_PREFIX}ANNUAL_SALARY")
    if not raw:
        return DEFAULT_ANNUAL_SALARY
    try:
        salary = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX}ANNUAL_SALARY={raw!r}: not a number")
        return DEFAULT_ANNUAL_SALARY
    if salary <= 0:
        logger.warning(f"Ignoring {ENV_PREFIX}ANNUAL_SALARY={raw!r}: must be positive")
        return DEFAULT_ANNUAL_SALARY
    return salary


DEFAULT_SCORING = ScoringConfig()
DEFAULT_FORECAST = ForecastConfig()
