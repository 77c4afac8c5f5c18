"""Unit tests for the rating calibration table."""

import pytest

from src.domains.rating.config import (
    BonusFactorConfig,
    PenaltyFactorConfig,
    RatingConfig,
    TierConfig,
    default_config,
)


class TestRatingConfig:
    def test_default_config_exists(self):
        assert isinstance(default_config, RatingConfig)

    def test_defaults(self):
        cfg = RatingConfig()
        assert cfg.base_points == 25.0
        assert cfg.weekly_hours.cap == 40.0
        assert cfg.weekly_earnings.cap == 5_000.0
        assert cfg.weekly_days_off.allowance == 1.0
        assert cfg.vacation_days_90.allowance == 14.0
        assert cfg.tiers.high_min == 70.0
        assert cfg.scoring_version == "team-rating-v1"

    def test_factor_maps(self):
        cfg = RatingConfig()
        assert set(cfg.bonus_factors()) == {
            "weekly_hours",
            "weekly_earnings",
            "referrals",
            "messages",
            "initiatives",
            "signals",
            "profitable_signals",
        }
        assert set(cfg.penalty_factors()) == {
            "weekly_days_off",
            "weekly_sick_days",
            "vacation_days_90",
        }

    def test_base_out_of_range_raises(self):
        with pytest.raises(ValueError, match="base_points"):
            RatingConfig(base_points=120.0)

    def test_zero_cap_raises(self):
        with pytest.raises(ValueError, match="weekly_hours.cap"):
            RatingConfig(weekly_hours=BonusFactorConfig(cap=0.0, max_points=10.0))

    def test_positive_floor_raises(self):
        with pytest.raises(ValueError, match="weekly_sick_days.floor"):
            RatingConfig(weekly_sick_days=PenaltyFactorConfig(points_per_unit=1.0, floor=5.0))

    def test_inverted_tiers_raise(self):
        with pytest.raises(ValueError, match="stable_min"):
            RatingConfig(tiers=TierConfig(high_min=40.0, stable_min=60.0))


class TestFromEnv:
    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("RATING_BASE_POINTS", "30")
        monkeypatch.setenv("RATING_WEEKLY_HOURS_CAP", "35")
        monkeypatch.setenv("RATING_SCORING_VERSION", "team-rating-v2")
        cfg = RatingConfig.from_env()
        assert cfg.base_points == 30.0
        assert cfg.weekly_hours.cap == 35.0
        assert cfg.scoring_version == "team-rating-v2"

    def test_invalid_override_raises(self, monkeypatch):
        monkeypatch.setenv("RATING_WEEKLY_EARNINGS_CAP", "-1")
        with pytest.raises(ValueError):
            RatingConfig.from_env()

    def test_does_not_mutate_default(self, monkeypatch):
        monkeypatch.setenv("RATING_WEEKLY_HOURS_CAP", "10")
        RatingConfig.from_env()
        assert default_config.weekly_hours.cap == 40.0
