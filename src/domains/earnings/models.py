"""Pydantic models for earnings, splits and rollups."""

import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from src.domains.calendar.models import DateWindow

# --- Enums ---


class EarningCategory(StrEnum):
    MEMECOINS = "memecoins"
    FUTURES = "futures"
    NFT = "nft"
    SPOT = "spot"
    POLYMARKET = "polymarket"
    STAKING = "staking"
    AIRDROP = "airdrop"


# --- Records ---


class EarningRecord(BaseModel):
    """One recorded cash inflow attributable to the team.

    ``user_id`` is the record owner; ``participants`` lists everyone who
    shares the net amount. An empty participant list means the owner alone.
    """

    id: str = ""
    user_id: str
    date: datetime.date
    category: EarningCategory
    amount: float = 0.0
    pool_amount: float | None = None
    participants: list[str] = Field(default_factory=list)


# --- Split Output ---


class EarningSplit(BaseModel):
    record_id: str
    gross: float
    pool: float
    net: float
    participants: list[str]
    per_participant_share: float
    per_participant_pool: float


class EarningsSummary(BaseModel):
    gross: float = 0.0
    pool: float = 0.0
    net: float = 0.0


# --- Rollup Output ---


class ContributorShare(BaseModel):
    member: str
    net: float


class CategoryRollup(BaseModel):
    category: EarningCategory
    gross: float = 0.0
    pool: float = 0.0
    net: float = 0.0
    count: int = 0
    top_participants: list[ContributorShare] = Field(default_factory=list)


class ContributorRanking(BaseModel):
    member: str
    net: float = 0.0
    pool_share: float = 0.0
    record_count: int = 0


class TeamTotals(BaseModel):
    net: float = 0.0
    pool: float = 0.0
    members: int = 0


# --- Request Models ---


class CategoryRollupRequest(BaseModel):
    records: list[EarningRecord]
    window: DateWindow | None = None


class ContributorRollupRequest(BaseModel):
    members: list[str]
    records: list[EarningRecord]
    window: DateWindow | None = None
