"""API endpoints for evidence aggregation and bet valuation."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from practice.config import ScoringConfig, default_annual_salary
from practice.evidence import belief_duration, bet_timeline_years, weighted_confidence
from practice.types import Action, Belief, Bet
from practice.valuation import rank_bets, refresh_bet, upside_multiplier_for, value_bet

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bets"])

_scoring_config: ScoringConfig | None = None


def _get_scoring_config() -> ScoringConfig:
    """Get or load the scoring constants (environment overrides applied once)."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig.from_env()
    return _scoring_config


class BeliefIn(BaseModel):
    id: str
    bet_id: Optional[str] = None
    confidence: Optional[float] = Field(50, ge=0, le=100)
    duration_days: Optional[int] = Field(0, ge=0)
    status: Literal["untested", "testing", "proven", "disproven"] = "untested"

    def to_record(self) -> Belief:
        return Belief(**self.model_dump())


class ActionIn(BaseModel):
    id: str
    bet_id: Optional[str] = None
    belief_id: Optional[str] = None
    confidence: Optional[float] = Field(50, ge=0, le=100)
    duration_days: Optional[int] = Field(30, ge=0)
    status: Literal["committed", "done", "skipped"] = "committed"

    def to_record(self) -> Action:
        return Action(**self.model_dump())


class BetIn(BaseModel):
    id: str
    name: str = ""
    upside: Optional[str] = None
    upside_multiplier: Optional[float] = None
    confidence: Optional[float] = Field(None, ge=0, le=100)
    computed_confidence: Optional[float] = Field(None, ge=0, le=100)
    timeline: Optional[str] = None
    downside_override: Optional[float] = None
    status: Literal["active", "paused", "closed"] = "active"

    def to_record(self) -> Bet:
        data = self.model_dump()
        # A structured upside label implies its multiplier
        if data["upside_multiplier"] is None:
            data["upside_multiplier"] = upside_multiplier_for(data["upside"])
        return Bet(**data)


class EvidenceRequest(BaseModel):
    beliefs: list[BeliefIn] = Field(default_factory=list)
    actions: list[ActionIn] = Field(default_factory=list)


class EvidenceResponse(BaseModel):
    weighted_confidence: Optional[int]
    timeline_years: float
    belief_durations: dict[str, float]


class BetScoreRequest(BaseModel):
    bet: BetIn
    beliefs: list[BeliefIn] = Field(default_factory=list)
    actions: list[ActionIn] = Field(default_factory=list)
    annual_salary: Optional[float] = Field(None, gt=0)
    use_evidence_confidence: bool = True


class BetValuationOut(BaseModel):
    id: str
    name: str
    confidence: float
    confidence_is_computed: bool
    timeline_years: float
    timeline_source: Literal["actions", "text"]
    upside_multiplier: float
    upside_is_auto: bool
    downside: Optional[float]
    downside_is_override: bool
    expected_value: Optional[float]
    score: float
    label: str
    color: Literal["green", "yellow", "red"]


class BetRankRequest(BaseModel):
    bets: list[BetIn]
    beliefs: list[BeliefIn] = Field(default_factory=list)
    actions: list[ActionIn] = Field(default_factory=list)
    annual_salary: Optional[float] = Field(None, gt=0)


class BetRankResponse(BaseModel):
    annual_salary: float
    bets: list[BetValuationOut]
    count: int


def _value(
    bet: Bet,
    beliefs: list[Belief],
    actions: list[Action],
    annual_salary: float,
    use_evidence_confidence: bool = True,
) -> BetValuationOut:
    config = _get_scoring_config()
    if use_evidence_confidence and (beliefs or actions):
        bet = refresh_bet(bet, beliefs, actions, config=config)
    valuation = value_bet(bet, actions, beliefs, annual_salary, config=config)
    return BetValuationOut(id=bet.id, name=bet.name, **asdict(valuation))


@router.post("/evidence/confidence", response_model=EvidenceResponse)
async def evidence_confidence(payload: EvidenceRequest) -> EvidenceResponse:
    """Weighted confidence and committed timeline for a set of beliefs and actions."""
    config = _get_scoring_config()
    beliefs = [b.to_record() for b in payload.beliefs]
    actions = [a.to_record() for a in payload.actions]

    return EvidenceResponse(
        weighted_confidence=weighted_confidence(beliefs, actions, config=config),
        timeline_years=bet_timeline_years(actions, config=config),
        belief_durations={b.id: belief_duration(b.id, actions, config=config) for b in beliefs},
    )


@router.post("/bets/score", response_model=BetValuationOut)
async def score_bet(payload: BetScoreRequest) -> BetValuationOut:
    """Valuation and ranking score for one bet and its linked evidence."""
    salary = payload.annual_salary or default_annual_salary()
    beliefs = [b.to_record() for b in payload.beliefs]
    actions = [a.to_record() for a in payload.actions]
    return _value(payload.bet.to_record(), beliefs, actions, salary, payload.use_evidence_confidence)


def rank_bet_request(payload: BetRankRequest) -> BetRankResponse:
    """Score every bet against its linked evidence and return them best first.

    Raises:
        ValueError: If two bets share an id
    """
    ids = [b.id for b in payload.bets]
    if len(ids) != len(set(ids)):
        raise ValueError("Bet ids must be unique")

    salary = payload.annual_salary or default_annual_salary()
    beliefs = [b.to_record() for b in payload.beliefs]
    actions = [a.to_record() for a in payload.actions]

    valued: dict[str, BetValuationOut] = {}
    scored: list[Bet] = []
    for bet_in in payload.bets:
        bet = bet_in.to_record()
        linked_beliefs = [b for b in beliefs if b.bet_id == bet.id]
        linked_actions = [a for a in actions if a.bet_id == bet.id]
        out = _value(bet, linked_beliefs, linked_actions, salary)
        valued[bet.id] = out
        scored.append(Bet(id=bet.id, bet_score=out.score))

    ranked = [valued[bet.id] for bet in rank_bets(scored)]
    logger.info(f"Ranked {len(ranked)} bets")
    return BetRankResponse(annual_salary=salary, bets=ranked, count=len(ranked))


@router.post("/bets/rank", response_model=BetRankResponse)
async def rank(payload: BetRankRequest) -> BetRankResponse:
    """Score every bet against its linked evidence and return them best first."""
    try:
        return rank_bet_request(payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
