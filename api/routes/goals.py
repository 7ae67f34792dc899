"""API endpoints for metric trends, goal progress and forecasts."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import asdict
from typing import Any, Literal, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from practice.config import ForecastConfig
from practice.trends import comparison_entry, forecast, goal_progress, parse_period, summarize_goal, trend_delta
from practice.types import Goal, Observation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["goals"])

_forecast_config: ForecastConfig | None = None


def _get_forecast_config() -> ForecastConfig:
    """Get or load the forecast constants (environment overrides applied once)."""
    global _forecast_config
    if _forecast_config is None:
        _forecast_config = ForecastConfig.from_env()
    return _forecast_config


PeriodIn = Union[Literal[30, 60, 90], Literal["30", "60", "90", "YTD"]]


class ObservationIn(BaseModel):
    date: dt.date
    value: float


class SeriesRequest(BaseModel):
    series: list[ObservationIn] = Field(..., description="Readings ordered newest first")
    period: PeriodIn = 30
    higher_is_better: Optional[bool] = None
    as_of: Optional[dt.date] = None


class GoalProgressRequest(BaseModel):
    current_value: Optional[float] = None
    target_value: Optional[float] = None
    higher_is_better: Optional[bool] = None


class ForecastRequest(BaseModel):
    current: Optional[float] = None
    goal: Optional[float] = None
    comparison: Optional[float] = None
    days_between: Optional[float] = None
    higher_is_better: Optional[bool] = None
    as_of: Optional[dt.date] = None


class GoalSummaryRequest(SeriesRequest):
    name: str = ""
    current_value: Optional[float] = None
    target_value: Optional[float] = None
    unit: Optional[str] = None


def _observations(series: list[ObservationIn]) -> list[Observation]:
    observations = [Observation(date=o.date, value=o.value) for o in series]
    for newer, older in zip(observations, observations[1:]):
        if newer.date < older.date:
            raise HTTPException(status_code=400, detail="series must be ordered newest first")
    return observations


def _asdict_or_none(value: Any) -> Optional[dict[str, Any]]:
    return asdict(value) if value is not None else None


@router.post("/trends/comparison")
async def trend_comparison(payload: SeriesRequest) -> dict[str, Any]:
    """Comparison reading for a look-back window and the delta against the latest one."""
    config = _get_forecast_config()
    series = _observations(payload.series)
    period = parse_period(payload.period)
    comparison = comparison_entry(series, period, payload.as_of)

    delta = None
    if comparison is not None:
        delta = trend_delta(series[0].value, comparison.value, payload.higher_is_better, config=config)

    return {
        "period": period,
        "latest": _asdict_or_none(series[0]) if series else None,
        "comparison": _asdict_or_none(comparison),
        "delta": _asdict_or_none(delta),
    }


@router.post("/goals/progress")
async def progress(payload: GoalProgressRequest) -> dict[str, Any]:
    """Bucket a current value against its target: met, close or far."""
    return {
        "progress": goal_progress(
            payload.current_value,
            payload.target_value,
            payload.higher_is_better,
            config=_get_forecast_config(),
        )
    }


@router.post("/goals/forecast")
async def goal_forecast(payload: ForecastRequest) -> dict[str, Any]:
    """Constant-rate ETA for a goal. ``forecast`` is null when no forecast applies."""
    result = forecast(
        payload.current,
        payload.goal,
        payload.comparison,
        payload.days_between,
        payload.higher_is_better,
        payload.as_of,
        config=_get_forecast_config(),
    )
    return {"forecast": _asdict_or_none(result)}


@router.post("/goals/summary")
async def goal_summary(payload: GoalSummaryRequest) -> dict[str, Any]:
    """Comparison, delta, progress and forecast for one goal metric."""
    series = _observations(payload.series)
    goal = Goal(
        name=payload.name,
        current_value=payload.current_value,
        target_value=payload.target_value,
        higher_is_better=payload.higher_is_better,
        unit=payload.unit,
    )
    summary = summarize_goal(series, goal, payload.period, payload.as_of, config=_get_forecast_config())
    logger.debug(f"Goal summary for {goal.name!r}: progress={summary.progress}")
    return {"name": goal.name, "unit": goal.unit, **asdict(summary)}
