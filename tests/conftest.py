"""Shared test fixtures for pytest.

Provides common records and metric series used across multiple test files.
"""

from datetime import date, timedelta

import pytest

from practice.types import Action, Belief, Bet, Observation

# Reference "today" for every date-dependent test
TODAY = date(2026, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def sample_bet() -> Bet:
    """A bet with a manual multiplier and a parseable legacy timeline."""
    return Bet(
        id="bet-1",
        name="Index (Startup)",
        upside="Strong (10x)",
        upside_multiplier=10,
        confidence=80,
        timeline="2 years",
    )


@pytest.fixture
def sample_beliefs() -> list[Belief]:
    return [
        Belief(id="belief-1", bet_id="bet-1", confidence=80, duration_days=60, status="testing"),
        Belief(id="belief-2", bet_id="bet-1", confidence=40, duration_days=0, status="untested"),
    ]


@pytest.fixture
def sample_actions() -> list[Action]:
    return [
        Action(id="take-1", bet_id="bet-1", belief_id="belief-1", confidence=70, duration_days=90),
        Action(id="take-2", bet_id="bet-1", belief_id="belief-1", confidence=60, duration_days=30),
        Action(id="take-3", bet_id="bet-1", belief_id=None, confidence=50, duration_days=60),
    ]


@pytest.fixture
def sample_series() -> list[Observation]:
    """Five weekly-ish weight readings spanning 100 days, newest first.

    Dates relative to TODAY: 0, 20, 45, 70 and 100 days ago.
    """
    offsets_and_values = [(0, 180.0), (20, 182.5), (45, 185.0), (70, 187.0), (100, 190.0)]
    return [Observation(date=TODAY - timedelta(days=offset), value=value) for offset, value in offsets_and_values]
