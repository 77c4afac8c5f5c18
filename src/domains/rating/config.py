"""Rating calibration table with documented defaults.

The rating starts from a base and every factor adds or subtracts points.
Bonus factors grow linearly with their input up to a cap and stay flat
beyond it. Penalty factors subtract a fixed number of points per unit above
a free allowance and bottom out at a floor. The composite is clamped to
[0, 100].

With the defaults, a member who maxes every bonus factor and has no
penalties reaches 105 raw points, so full marks are attainable without
maxing everything.
"""

import os
from dataclasses import dataclass, field


@dataclass
class BonusFactorConfig:
    """Linear bonus: ``max_points * min(value, cap) / cap``."""

    cap: float
    max_points: float

    def validate(self, name: str) -> None:
        if self.cap <= 0:
            raise ValueError(f"{name}.cap must be positive, got {self.cap}")
        if self.max_points < 0:
            raise ValueError(f"{name}.max_points must be non-negative, got {self.max_points}")


@dataclass
class PenaltyFactorConfig:
    """Linear penalty: ``-points_per_unit * max(value - allowance, 0)``, floored."""

    points_per_unit: float
    floor: float
    allowance: float = 0.0

    def validate(self, name: str) -> None:
        if self.points_per_unit < 0:
            raise ValueError(
                f"{name}.points_per_unit must be non-negative, got {self.points_per_unit}"
            )
        if self.floor > 0:
            raise ValueError(f"{name}.floor must be zero or negative, got {self.floor}")
        if self.allowance < 0:
            raise ValueError(f"{name}.allowance must be non-negative, got {self.allowance}")


@dataclass
class TierConfig:
    # rating >= high_min => high; >= stable_min => stable; otherwise critical
    high_min: float = 70.0
    stable_min: float = 50.0


@dataclass
class RatingConfig:
    """Top-level rating configuration.

    Weekly factors judge recent throughput and attendance. Vacation is judged
    over 90 days so that one strong week cannot erase a long absence.
    """

    base_points: float = 25.0

    # Throughput bonuses (weekly window)
    weekly_hours: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=40.0, max_points=25.0)
    )
    weekly_earnings: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=5_000.0, max_points=25.0)
    )

    # Referrals (snapshot window): 2 points each, up to 5 referrals
    referrals: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=5.0, max_points=10.0)
    )

    # Manually maintained counters (snapshot window)
    messages: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=300.0, max_points=5.0)
    )
    initiatives: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=5.0, max_points=5.0)
    )
    signals: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=20.0, max_points=5.0)
    )
    profitable_signals: BonusFactorConfig = field(
        default_factory=lambda: BonusFactorConfig(cap=10.0, max_points=5.0)
    )

    # Attendance penalties. One day off a week is free.
    weekly_days_off: PenaltyFactorConfig = field(
        default_factory=lambda: PenaltyFactorConfig(points_per_unit=3.0, floor=-12.0, allowance=1.0)
    )
    weekly_sick_days: PenaltyFactorConfig = field(
        default_factory=lambda: PenaltyFactorConfig(points_per_unit=2.5, floor=-10.0)
    )
    # Two weeks of vacation per quarter carry no penalty
    vacation_days_90: PenaltyFactorConfig = field(
        default_factory=lambda: PenaltyFactorConfig(points_per_unit=1.0, floor=-15.0, allowance=14.0)
    )

    tiers: TierConfig = field(default_factory=TierConfig)

    scoring_version: str = "team-rating-v1"

    def __post_init__(self) -> None:
        if not 0.0 <= self.base_points <= 100.0:
            raise ValueError(f"base_points must be within [0, 100], got {self.base_points}")
        for name, factor in self.bonus_factors().items():
            factor.validate(name)
        for name, factor in self.penalty_factors().items():
            factor.validate(name)
        if self.tiers.stable_min > self.tiers.high_min:
            raise ValueError(
                f"tiers.stable_min ({self.tiers.stable_min}) must not exceed "
                f"tiers.high_min ({self.tiers.high_min})"
            )

    def bonus_factors(self) -> dict[str, BonusFactorConfig]:
        return {
            "weekly_hours": self.weekly_hours,
            "weekly_earnings": self.weekly_earnings,
            "referrals": self.referrals,
            "messages": self.messages,
            "initiatives": self.initiatives,
            "signals": self.signals,
            "profitable_signals": self.profitable_signals,
        }

    def penalty_factors(self) -> dict[str, PenaltyFactorConfig]:
        return {
            "weekly_days_off": self.weekly_days_off,
            "weekly_sick_days": self.weekly_sick_days,
            "vacation_days_90": self.vacation_days_90,
        }

    @classmethod
    def from_env(cls) -> "RatingConfig":
        """Load config with environment variable overrides (RATING_ prefix)."""
        config = cls()

        if v := os.getenv("RATING_BASE_POINTS"):
            config.base_points = float(v)
        if v := os.getenv("RATING_WEEKLY_HOURS_CAP"):
            config.weekly_hours.cap = float(v)
        if v := os.getenv("RATING_WEEKLY_EARNINGS_CAP"):
            config.weekly_earnings.cap = float(v)
        if v := os.getenv("RATING_SICK_DAY_POINTS"):
            config.weekly_sick_days.points_per_unit = float(v)
        if v := os.getenv("RATING_VACATION_ALLOWANCE_DAYS"):
            config.vacation_days_90.allowance = float(v)
        if v := os.getenv("RATING_SCORING_VERSION"):
            config.scoring_version = v

        # Re-validate after overrides
        config.__post_init__()
        return config


default_config = RatingConfig()
