from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional, Union

BetStatus = Literal["active", "paused", "closed"]
BeliefStatus = Literal["untested", "testing", "proven", "disproven"]
ActionStatus = Literal["committed", "done", "skipped"]

Period = Union[int, Literal["YTD"]]
GoalProgress = Literal["met", "close", "far"]
TimelineSource = Literal["actions", "text"]
ScoreColor = Literal["green", "yellow", "red"]
TrendColor = Literal["positive", "negative"]
RangeStatus = Literal["below", "within", "above"]


@dataclass(frozen=True)
class Bet:
    id: str
    name: str = ""
    upside: Optional[str] = None  # structured label or legacy free text
    upside_multiplier: Optional[float] = None  # None = auto-calculated
    confidence: Optional[float] = None  # 0-100, manual
    computed_confidence: Optional[float] = None  # 0-100, from evidence
    timeline: Optional[str] = None  # legacy free text
    downside_override: Optional[float] = None
    status: BetStatus = "active"
    bet_score: Optional[float] = None  # cached


@dataclass(frozen=True)
class Belief:
    id: str
    bet_id: Optional[str] = None
    confidence: Optional[float] = 50
    duration_days: Optional[int] = 0
    status: BeliefStatus = "untested"


@dataclass(frozen=True)
class Action:
    id: str
    bet_id: Optional[str] = None
    belief_id: Optional[str] = None
    confidence: Optional[float] = 50
    duration_days: Optional[int] = 30
    status: ActionStatus = "committed"


@dataclass(frozen=True)
class Goal:
    name: str
    current_value: Optional[float]
    target_value: Optional[float]
    higher_is_better: Optional[bool] = None  # None = direction unknown
    unit: Optional[str] = None


@dataclass(frozen=True)
class Observation:
    date: date
    value: float


@dataclass(frozen=True)
class BetValuation:
    """Derived figures for one bet.

    Monetary fields share the currency unit of the salary input and are
    undecorated.
    """

    confidence: float
    confidence_is_computed: bool
    timeline_years: float
    timeline_source: TimelineSource
    upside_multiplier: float
    upside_is_auto: bool
    downside: Optional[float]
    downside_is_override: bool
    expected_value: Optional[float]
    score: float
    label: str
    color: ScoreColor


@dataclass(frozen=True)
class TrendDelta:
    diff: Optional[float]
    improved: Optional[bool]  # None = no change or direction unknown
    arrow: str  # "↑", "↓" or ""
    color: Optional[TrendColor]


@dataclass(frozen=True)
class ForecastResult:
    is_already_met: bool
    time_to_goal_label: str
    target_date_label: Optional[str] = None
    days_to_goal: Optional[float] = None
    target_date: Optional[date] = None


@dataclass(frozen=True)
class GoalSummary:
    latest: Optional[Observation]
    comparison: Optional[Observation]
    delta: Optional[TrendDelta]
    progress: Optional[GoalProgress]
    forecast: Optional[ForecastResult]
