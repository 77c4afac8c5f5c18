"""Member rating API endpoints."""

from datetime import date

import structlog
from fastapi import APIRouter, Depends, Query

from src.domains.operations import compute_rating
from src.domains.rating.models import RatingComputeRequest
from src.domains.rating.service import RatingService
from src.store.memory import InMemoryRecordStore, get_record_store

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/rating", tags=["rating"])


@router.post("/compute")
async def compute(request: RatingComputeRequest) -> dict:
    """Score a member from explicitly supplied inputs."""
    result = compute_rating(
        request.user_id,
        request.snapshot,
        request.weekly_hours,
        request.weekly_net_earnings,
        request.weekly_days_off,
        request.weekly_sick_days,
        request.vacation_days_last_90,
    )
    return result.model_dump(mode="json")


@router.post("/{user_id}/refresh")
async def refresh_rating(
    user_id: str,
    today: date | None = Query(default=None),  # noqa: B008
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> dict:
    """Recompute a member's snapshot and rating from the stored records."""
    report = await RatingService(store).refresh(user_id, today)
    return report.model_dump(mode="json")


@router.get("/{user_id}/snapshot")
async def get_snapshot(
    user_id: str,
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> dict:
    snapshot = await store.fetch_rating_snapshot(user_id)
    if snapshot is None:
        raise KeyError(f"No rating snapshot for {user_id}")
    return snapshot.model_dump(mode="json")
