"""Tests for POST /trends/comparison and the /goals endpoints."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SERIES = [
    {"date": "2026-06-15", "value": 180.0},
    {"date": "2026-05-26", "value": 182.5},
    {"date": "2026-05-01", "value": 185.0},
    {"date": "2026-04-06", "value": 187.0},
    {"date": "2026-03-07", "value": 190.0},
]


@pytest.fixture
def client() -> TestClient:
    from api.main import app

    return TestClient(app)


def test_trend_comparison(client):
    resp = client.post(
        "/trends/comparison",
        json={"series": SERIES, "period": 30, "higher_is_better": False, "as_of": "2026-06-15"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["period"] == 30
    assert data["latest"] == {"date": "2026-06-15", "value": 180.0}
    assert data["comparison"] == {"date": "2026-05-01", "value": 185.0}
    assert data["delta"]["diff"] == -5
    assert data["delta"]["arrow"] == "↓"
    assert data["delta"]["color"] == "positive"


def test_trend_comparison_ytd_without_prior_year(client):
    resp = client.post("/trends/comparison", json={"series": SERIES, "period": "YTD", "as_of": "2026-06-15"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["period"] == "YTD"
    assert data["comparison"] is None
    assert data["delta"] is None


def test_trend_comparison_rejects_unordered_series(client):
    resp = client.post("/trends/comparison", json={"series": list(reversed(SERIES)), "period": 30})

    assert resp.status_code == 400
    assert "newest first" in resp.json()["detail"]


def test_trend_comparison_rejects_unknown_period(client):
    resp = client.post("/trends/comparison", json={"series": SERIES, "period": 45})
    assert resp.status_code == 422


def test_goal_progress(client):
    resp = client.post(
        "/goals/progress",
        json={"current_value": 91, "target_value": 100, "higher_is_better": True},
    )

    assert resp.status_code == 200
    assert resp.json() == {"progress": "close"}


def test_goal_progress_missing_target(client):
    resp = client.post("/goals/progress", json={"current_value": 91})

    assert resp.status_code == 200
    assert resp.json() == {"progress": None}


def test_goal_forecast(client):
    resp = client.post(
        "/goals/forecast",
        json={
            "current": 20,
            "goal": 15,
            "comparison": 25,
            "days_between": 30,
            "higher_is_better": False,
            "as_of": "2026-06-15",
        },
    )

    assert resp.status_code == 200
    result = resp.json()["forecast"]
    assert result["is_already_met"] is False
    assert result["time_to_goal_label"] == "~4 weeks"
    assert result["target_date"] == "2026-07-15"
    assert result["target_date_label"] == "Jul 15, 2026"


def test_goal_forecast_trending_away(client):
    resp = client.post(
        "/goals/forecast",
        json={"current": 20, "goal": 15, "comparison": 18, "days_between": 30, "higher_is_better": False},
    )

    assert resp.status_code == 200
    assert resp.json() == {"forecast": None}


def test_goal_summary(client):
    resp = client.post(
        "/goals/summary",
        json={
            "name": "Weight",
            "unit": "lb",
            "series": SERIES,
            "period": "30",
            "current_value": 180,
            "target_value": 175,
            "higher_is_better": False,
            "as_of": "2026-06-15",
        },
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Weight"
    assert data["unit"] == "lb"
    assert data["comparison"]["value"] == 185.0
    assert data["progress"] == "close"
    assert data["forecast"]["time_to_goal_label"] == "~6 weeks"
    assert data["forecast"]["target_date"] == "2026-07-30"
