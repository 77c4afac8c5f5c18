"""Earnings split and leaderboard API endpoints."""

import structlog
from fastapi import APIRouter

from src.domains.earnings.models import (
    CategoryRollupRequest,
    ContributorRollupRequest,
    EarningRecord,
)
from src.domains.operations import (
    rollup_categories,
    rollup_contributors,
    rollup_team_totals,
    split_earning,
)

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/earnings", tags=["earnings"])


@router.post("/split")
async def split(record: EarningRecord) -> dict:
    return split_earning(record).model_dump(mode="json")


@router.post("/rollup/categories")
async def categories(request: CategoryRollupRequest) -> dict:
    items = rollup_categories(request.records, request.window)
    return {
        "items": [item.model_dump(mode="json") for item in items],
        "total": len(items),
    }


@router.post("/rollup/contributors")
async def contributors(request: ContributorRollupRequest) -> dict:
    items = rollup_contributors(request.members, request.records, request.window)
    team = rollup_team_totals(request.members, request.records, request.window)
    return {
        "items": [item.model_dump(mode="json") for item in items],
        "total": len(items),
        "team": team.model_dump(mode="json"),
    }
