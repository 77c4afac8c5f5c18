"""Team member rating engine.

A fixed scoring pipeline that turns a member's snapshot counters and a set
of recent-window scalars into a 0-100 rating. The inputs deliberately come
from different windows:

- weekly: hours worked, net earnings, days off, sick days
- snapshot (30-day look-back): referrals and the manual counters
- 90 days: vacation days

Every factor's contribution is quantised to 1e-4 points and kept as a
Decimal. The clamp to [0, 100] is recorded as its own ``clamp_adjustment``
entry, so the breakdown always sums exactly to the rating.
"""

import math
from decimal import ROUND_HALF_EVEN, Decimal

import structlog

from .config import BonusFactorConfig, PenaltyFactorConfig, RatingConfig, default_config
from .models import (
    FactorContribution,
    FactorWindow,
    RatingData,
    RatingResult,
    RatingTier,
)

logger = structlog.get_logger()

_QUANTUM = Decimal("0.0001")
_MIN_RATING = Decimal(0)
_MAX_RATING = Decimal(100)


def _points(value: float) -> Decimal:
    return Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)


def _sanitize(value: float) -> float:
    """Negative and NaN inputs count as zero.

    Positive infinity is kept: bonus factors cap it and penalty factors floor it.
    """
    if value is None or math.isnan(value) or value < 0:
        return 0.0
    return float(value)


def bonus_points(value: float, cfg: BonusFactorConfig) -> float:
    return cfg.max_points * min(value, cfg.cap) / cfg.cap


def penalty_points(value: float, cfg: PenaltyFactorConfig) -> float:
    excess = max(value - cfg.allowance, 0.0)
    if excess == 0 or cfg.points_per_unit == 0:
        return 0.0
    return max(-cfg.points_per_unit * excess, cfg.floor)


class RatingEngine:
    """Computes a member rating and its per-factor breakdown."""

    def __init__(self, config: RatingConfig | None = None) -> None:
        self._config = config or default_config

    def score(
        self,
        user_id: str,
        snapshot: RatingData | None,
        *,
        weekly_hours: float,
        weekly_net_earnings: float,
        weekly_days_off: float,
        weekly_sick_days: float,
        vacation_days_last_90: float,
    ) -> RatingResult:
        """Score one member.

        Args:
            user_id: Member identifier.
            snapshot: Snapshot holding referrals and the manual counters. A
                missing snapshot scores those factors as zero.
            weekly_hours: Hours worked in the current week.
            weekly_net_earnings: Member's net earnings share in the current week.
            weekly_days_off: Days off in the current week.
            weekly_sick_days: Sick days in the current week.
            vacation_days_last_90: Vacation days in the last 90 days.

        Returns:
            RatingResult whose breakdown points sum to ``rating``.
        """
        cfg = self._config
        snapshot = snapshot or RatingData(user_id=user_id)

        raw_inputs = {
            "weekly_hours": weekly_hours,
            "weekly_earnings": weekly_net_earnings,
            "referrals": snapshot.referrals,
            "messages": snapshot.messages,
            "initiatives": snapshot.initiatives,
            "signals": snapshot.signals,
            "profitable_signals": snapshot.profitable_signals,
            "weekly_days_off": weekly_days_off,
            "weekly_sick_days": weekly_sick_days,
            "vacation_days_90": vacation_days_last_90,
        }
        inputs = {name: _sanitize(value) for name, value in raw_inputs.items()}
        normalized = [
            name for name, value in raw_inputs.items() if value is None or inputs[name] != value
        ]
        if normalized:
            logger.warning("rating_inputs_normalized", user_id=user_id, factors=normalized)

        breakdown: dict[str, FactorContribution] = {
            "base": FactorContribution(
                factor="base",
                window=FactorWindow.BASE,
                input_value=cfg.base_points,
                points=_points(cfg.base_points),
            )
        }
        for name, factor_cfg in cfg.bonus_factors().items():
            breakdown[name] = self._bonus(name, inputs[name], factor_cfg)
        for name, factor_cfg in cfg.penalty_factors().items():
            breakdown[name] = self._penalty(name, inputs[name], factor_cfg)

        raw = sum((f.points for f in breakdown.values()), Decimal(0))
        rating = min(max(raw, _MIN_RATING), _MAX_RATING)
        breakdown["clamp_adjustment"] = FactorContribution(
            factor="clamp_adjustment",
            window=FactorWindow.BASE,
            input_value=float(raw),
            points=rating - raw,
            contributing_factors=(
                [f"Raw score {raw} clamped to {rating}"] if rating != raw else []
            ),
        )

        result = RatingResult(
            user_id=user_id,
            rating=rating,
            tier=self.rating_to_tier(float(rating)),
            breakdown=breakdown,
            scoring_version=cfg.scoring_version,
        )

        logger.info(
            "rating_computed",
            user_id=user_id,
            rating=float(result.rating),
            tier=result.tier.value,
            raw_score=float(raw),
        )

        return result

    def rating_to_tier(self, rating: float) -> RatingTier:
        tiers = self._config.tiers
        if rating >= tiers.high_min:
            return RatingTier.HIGH
        elif rating >= tiers.stable_min:
            return RatingTier.STABLE
        else:
            return RatingTier.CRITICAL

    def _bonus(self, name: str, value: float, cfg: BonusFactorConfig) -> FactorContribution:
        factors: list[str] = []
        if value >= cfg.cap:
            factors.append(f"{name} at cap ({value:g} of {cfg.cap:g})")
        return FactorContribution(
            factor=name,
            window=_FACTOR_WINDOWS[name],
            input_value=value,
            points=_points(bonus_points(value, cfg)),
            contributing_factors=factors,
        )

    def _penalty(self, name: str, value: float, cfg: PenaltyFactorConfig) -> FactorContribution:
        factors: list[str] = []
        raw_penalty = -cfg.points_per_unit * max(value - cfg.allowance, 0.0)
        if raw_penalty < cfg.floor:
            factors.append(f"{name} penalty floored at {cfg.floor:g} ({value:g} days)")
        elif value > cfg.allowance:
            factors.append(f"{value:g} {name.replace('_', ' ')} above allowance of {cfg.allowance:g}")
        return FactorContribution(
            factor=name,
            window=_FACTOR_WINDOWS[name],
            input_value=value,
            points=_points(penalty_points(value, cfg)),
            contributing_factors=factors,
        )


_FACTOR_WINDOWS: dict[str, FactorWindow] = {
    "weekly_hours": FactorWindow.WEEK,
    "weekly_earnings": FactorWindow.WEEK,
    "referrals": FactorWindow.SNAPSHOT,
    "messages": FactorWindow.SNAPSHOT,
    "initiatives": FactorWindow.SNAPSHOT,
    "signals": FactorWindow.SNAPSHOT,
    "profitable_signals": FactorWindow.SNAPSHOT,
    "weekly_days_off": FactorWindow.WEEK,
    "weekly_sick_days": FactorWindow.WEEK,
    "vacation_days_90": FactorWindow.NINETY_DAYS,
}
