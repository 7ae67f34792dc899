"""Tests for tunable constants and environment overrides."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from practice.config import (
    DEFAULT_ANNUAL_SALARY,
    DEFAULT_SCORING,
    ForecastConfig,
    ScoringConfig,
    default_annual_salary,
)


class TestScoringConfig:
    """Tests for scoring constants."""

    def test_defaults(self) -> None:
        config = ScoringConfig()
        assert config.base_multiplier == 5.0
        assert config.min_confidence == 10.0
        assert config.risk_premium_exponent == 0.5
        assert config.time_premium_exponent == 0.3
        assert config.default_action_days == 30
        assert config.default_belief_days == 0
        assert config.bottom_label == "Poor"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SCORING.base_multiplier = 6.0

    def test_from_env_overrides_scalars(self, monkeypatch) -> None:
        monkeypatch.setenv("PRACTICE_BASE_MULTIPLIER", "6.5")
        monkeypatch.setenv("PRACTICE_DEFAULT_ACTION_DAYS", "14")
        config = ScoringConfig.from_env()
        assert config.base_multiplier == 6.5
        assert config.default_action_days == 14
        assert isinstance(config.default_action_days, int)

    def test_from_env_without_variables(self, monkeypatch) -> None:
        monkeypatch.delenv("PRACTICE_BASE_MULTIPLIER", raising=False)
        monkeypatch.setenv("PRACTICE_UPSIDE_STEP", "")
        assert ScoringConfig.from_env() == ScoringConfig()

    def test_from_env_ignores_bad_values(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv("PRACTICE_BASE_MULTIPLIER", "lots")
        with caplog.at_level(logging.WARNING, logger="practice.config"):
            config = ScoringConfig.from_env()
        assert config.base_multiplier == 5.0
        assert "PRACTICE_BASE_MULTIPLIER" in caplog.text


class TestForecastConfig:
    """Tests for forecast constants."""

    def test_defaults(self) -> None:
        config = ForecastConfig()
        assert config.noise_threshold == 0.1
        assert config.close_threshold == 0.10
        assert config.horizon_days == 730.0

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PRACTICE_HORIZON_DAYS", "365")
        assert ForecastConfig.from_env().horizon_days == 365.0


class TestAnnualSalary:
    """Tests for the opportunity-cost rate."""

    def test_default(self, monkeypatch) -> None:
        monkeypatch.delenv("PRACTICE_ANNUAL_SALARY", raising=False)
        assert default_annual_salary() == DEFAULT_ANNUAL_SALARY == 150_000

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PRACTICE_ANNUAL_SALARY", "90000")
        assert default_annual_salary() == 90_000

    @pytest.mark.parametrize("raw", ["abc", "0", "-5000"])
    def test_invalid_values_fall_back(self, monkeypatch, caplog, raw) -> None:
        monkeypatch.setenv("PRACTICE_ANNUAL_SALARY", raw)
        with caplog.at_level(logging.WARNING, logger="practice.config"):
            assert default_annual_salary() == DEFAULT_ANNUAL_SALARY
        assert "PRACTICE_ANNUAL_SALARY" in caplog.text
