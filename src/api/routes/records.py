"""Record intake endpoints backing the rating refresh."""

import structlog
from fastapi import APIRouter, Depends

from src.domains.attendance.models import DayStatusRecord, WorkSlotRecord
from src.domains.earnings.models import EarningRecord
from src.domains.rating.models import ReferralRecord
from src.store.memory import InMemoryRecordStore, get_record_store

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/records", tags=["records"])


@router.post("/earnings", status_code=201)
async def add_earning(
    record: EarningRecord,
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> dict:
    saved = await store.add_earning(record)
    return saved.model_dump(mode="json")


@router.delete("/earnings/{record_id}", status_code=204)
async def delete_earning(
    record_id: str,
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> None:
    await store.delete_earning(record_id)


@router.post("/day-statuses", status_code=201)
async def add_day_status(
    record: DayStatusRecord,
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> dict:
    saved = await store.add_day_status(record)
    return saved.model_dump(mode="json")


@router.post("/work-slots", status_code=201)
async def add_work_slot(
    record: WorkSlotRecord,
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> dict:
    saved = await store.add_work_slot(record)
    return saved.model_dump(mode="json")


@router.post("/referrals", status_code=201)
async def add_referral(
    record: ReferralRecord,
    store: InMemoryRecordStore = Depends(get_record_store),  # noqa: B008
) -> dict:
    saved = await store.add_referral(record)
    return saved.model_dump(mode="json")
