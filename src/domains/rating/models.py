"""Pydantic models for member rating snapshots and scoring output."""

import math
from datetime import UTC, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from src.domains.earnings.models import EarningsSummary

# Rating points are exact decimals so a breakdown always sums to its rating.
# JSON consumers receive plain numbers.
Points = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Factor inputs may be +inf, which has no JSON number; it is rendered as null.
FactorInput = Annotated[
    float,
    PlainSerializer(
        lambda v: v if math.isfinite(v) else None, return_type=float | None, when_used="json"
    ),
]

# --- Enums ---


class RatingTier(StrEnum):
    HIGH = "high"
    STABLE = "stable"
    CRITICAL = "critical"


class FactorWindow(StrEnum):
    BASE = "base"
    WEEK = "week"
    SNAPSHOT = "snapshot"
    NINETY_DAYS = "90d"


# --- Snapshot ---


class RatingData(BaseModel):
    """Per-member aggregate snapshot, overwritten on every recomputation.

    ``messages``, ``initiatives``, ``signals`` and ``profitable_signals`` are
    maintained by hand and carried over between recomputations.
    """

    user_id: str
    earnings: float = 0.0
    pool_amount: float = 0.0
    messages: int = 0
    initiatives: int = 0
    signals: int = 0
    profitable_signals: int = 0
    referrals: int = 0
    days_off: int = 0
    sick_days: int = 0
    vacation_days: int = 0
    absence_days: int = 0
    truancy_days: int = 0
    internship_days: int = 0
    rating: float = Field(default=0.0, ge=0, le=100)
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def net_earnings(self) -> float:
        return max(0.0, self.earnings - self.pool_amount)


class ReferralRecord(BaseModel):
    id: str = ""
    owner_id: str
    created_at: datetime


class ManualCounters(BaseModel):
    messages: int = 0
    initiatives: int = 0
    signals: int = 0
    profitable_signals: int = 0


# --- Scoring Output ---


class FactorContribution(BaseModel):
    factor: str
    window: FactorWindow
    input_value: FactorInput = 0.0
    points: Points
    contributing_factors: list[str] = Field(default_factory=list)


class RatingResult(BaseModel):
    user_id: str
    rating: Points
    tier: RatingTier
    breakdown: dict[str, FactorContribution] = Field(default_factory=dict)
    scoring_version: str = "team-rating-v1"

    def points(self) -> dict[str, Decimal]:
        return {name: factor.points for name, factor in self.breakdown.items()}


# --- Request / Report Models ---


class RatingComputeRequest(BaseModel):
    user_id: str
    snapshot: RatingData | None = None
    weekly_hours: float = 0.0
    weekly_net_earnings: float = 0.0
    weekly_days_off: float = 0.0
    weekly_sick_days: float = 0.0
    vacation_days_last_90: float = 0.0


class MemberRatingReport(BaseModel):
    user_id: str
    snapshot: RatingData
    result: RatingResult
    weekly_hours: float
    weekly_days_off: int
    weekly_sick_days: int
    vacation_days_last_90: int
    monthly_earnings: EarningsSummary
    weekly_earnings: EarningsSummary
    computed_at: datetime
