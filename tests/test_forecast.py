"""Tests for goal arrival forecasts and goal summaries."""

from __future__ import annotations

from datetime import date

import pytest

from practice.config import ForecastConfig
from practice.trends import forecast, format_target_date, summarize_goal, time_to_goal_label
from practice.types import Goal, Observation

from conftest import TODAY


class TestTimeToGoalLabel:
    """Tests for ETA buckets."""

    @pytest.mark.parametrize(
        "days,label",
        [
            (0.5, "<1 week"),
            (6.9, "<1 week"),
            (7, "~1 week"),
            (10, "~1 week"),
            (14, "~2 weeks"),
            (30, "~4 weeks"),
            (89, "~13 weeks"),
            (90, "~3 months"),
            (365, "~12 months"),
        ],
    )
    def test_buckets(self, days, label) -> None:
        assert time_to_goal_label(days) == label

    def test_format_target_date(self) -> None:
        assert format_target_date(date(2026, 11, 17)) == "Nov 17, 2026"
        assert format_target_date(date(2027, 3, 5)) == "Mar 5, 2027"


class TestForecast:
    """Tests for the constant-rate forecast."""

    def test_lower_is_better_example(self) -> None:
        """Test 25 -> 20 over 30 days with a goal of 15."""
        # rate = (20 - 25) / 30 = -1/6 per day; |15 - 20| / (1/6) = 30 days
        result = forecast(20, 15, 25, 30, higher_is_better=False, now=TODAY)

        assert result is not None
        assert result.is_already_met is False
        assert result.time_to_goal_label == "~4 weeks"
        assert result.days_to_goal == pytest.approx(30)
        assert result.target_date == date(2026, 7, 15)
        assert result.target_date_label == "Jul 15, 2026"

    def test_higher_is_better(self) -> None:
        # rate = 1 per day, 20 to go
        result = forecast(80, 100, 70, 10, higher_is_better=True, now=TODAY)
        assert result.time_to_goal_label == "~3 weeks"
        assert result.target_date == date(2026, 7, 5)

    def test_months_bucket(self) -> None:
        result = forecast(100, 200, 90, 10, higher_is_better=True, now=TODAY)
        assert result.time_to_goal_label == "~3 months"
        assert result.target_date == date(2026, 9, 23)

    def test_under_a_week(self) -> None:
        result = forecast(99, 100, 98, 1, higher_is_better=True, now=TODAY)
        assert result.time_to_goal_label == "<1 week"

    def test_trending_away_returns_none(self) -> None:
        """Test that a rising value with lower-is-better has no forecast."""
        assert forecast(20, 15, 18, 30, higher_is_better=False, now=TODAY) is None

    def test_flat_trend_returns_none(self) -> None:
        assert forecast(20, 15, 20, 30, higher_is_better=False, now=TODAY) is None

    def test_already_met(self) -> None:
        """Test that a met goal short-circuits regardless of the trend."""
        result = forecast(14, 15, 10, 30, higher_is_better=False, now=TODAY)
        assert result.is_already_met is True
        assert result.time_to_goal_label == "Goal met"
        assert result.target_date is None

    def test_beyond_horizon_returns_none(self) -> None:
        """Test that ETAs over two years are not reported."""
        # rate = -0.01/30 per day; 5 to go -> 15000 days
        assert forecast(20, 15, 20.01, 30, higher_is_better=False, now=TODAY) is None

    def test_horizon_configurable(self) -> None:
        config = ForecastConfig(horizon_days=20_000)
        result = forecast(20, 15, 20.01, 30, higher_is_better=False, now=TODAY, config=config)
        assert result is not None
        assert result.time_to_goal_label.endswith("months")

    @pytest.mark.parametrize(
        "args",
        [
            (None, 15, 25, 30, False),
            (20, None, 25, 30, False),
            (20, 15, None, 30, False),
            (20, 15, 25, None, False),
            (20, 15, 25, 0, False),
            (20, 15, 25, -30, False),
            (20, 15, 25, 30, None),
            (float("nan"), 15, 25, 30, False),
            (20, float("inf"), 25, 30, False),
        ],
    )
    def test_insufficient_data_returns_none(self, args) -> None:
        assert forecast(*args, now=TODAY) is None

    def test_defaults_to_today(self) -> None:
        """Test that a forecast without a reference date still has a target date."""
        result = forecast(20, 15, 25, 30, higher_is_better=False)
        assert result.target_date > date(2020, 1, 1)


class TestSummarizeGoal:
    """Tests for the combined goal summary."""

    def test_full_summary(self, sample_series) -> None:
        goal = Goal(name="Weight", current_value=180, target_value=175, higher_is_better=False, unit="lb")
        summary = summarize_goal(sample_series, goal, 30, now=TODAY)

        assert summary.latest is sample_series[0]
        assert summary.comparison is sample_series[2]
        assert summary.delta.diff == -5
        assert summary.delta.color == "positive"
        assert summary.progress == "close"
        # 5 lost over 45 days, 5 to go -> 45 days
        assert summary.forecast.days_to_goal == pytest.approx(45)
        assert summary.forecast.time_to_goal_label == "~6 weeks"
        assert summary.forecast.target_date == date(2026, 7, 30)

    def test_current_value_falls_back_to_latest(self, sample_series) -> None:
        goal = Goal(name="Weight", current_value=None, target_value=175, higher_is_better=False)
        summary = summarize_goal(sample_series, goal, 30, now=TODAY)
        assert summary.progress == "close"
        assert summary.forecast is not None

    def test_no_target(self, sample_series) -> None:
        goal = Goal(name="Weight", current_value=180, target_value=None, higher_is_better=False)
        summary = summarize_goal(sample_series, goal, 30, now=TODAY)
        assert summary.progress is None
        assert summary.forecast is None
        assert summary.delta is not None

    def test_single_reading(self) -> None:
        series = [Observation(date=TODAY, value=180.0)]
        goal = Goal(name="Weight", current_value=None, target_value=195, higher_is_better=True)
        summary = summarize_goal(series, goal, 30, now=TODAY)
        assert summary.latest is series[0]
        assert summary.comparison is None
        assert summary.delta is None
        assert summary.forecast is None
        assert summary.progress == "close"

    def test_empty_series(self) -> None:
        goal = Goal(name="Steps", current_value=None, target_value=10_000, higher_is_better=True)
        summary = summarize_goal([], goal, "YTD", now=TODAY)
        assert summary.latest is None
        assert summary.progress is None
