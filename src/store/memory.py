"""In-process record store.

Backs the HTTP surface and the tests. Earnings are matched to a member when
the member owns the record or is listed among its participants.
"""

import uuid
from datetime import date

import structlog

from src.domains.attendance.models import DayStatusRecord, WorkSlotRecord
from src.domains.earnings.models import EarningRecord
from src.domains.earnings.splitter import resolve_participants
from src.domains.rating.models import RatingData, ReferralRecord

logger = structlog.get_logger()


def _in_range(day: date, date_from: date | None, date_to: date | None) -> bool:
    if date_from is not None and day < date_from:
        return False
    if date_to is not None and day > date_to:
        return False
    return True


class InMemoryRecordStore:
    def __init__(self) -> None:
        self._earnings: dict[str, EarningRecord] = {}
        self._statuses: dict[str, DayStatusRecord] = {}
        self._slots: dict[str, WorkSlotRecord] = {}
        self._referrals: dict[str, ReferralRecord] = {}
        self._snapshots: dict[str, RatingData] = {}

    # --- Writes ---

    async def add_earning(self, record: EarningRecord) -> EarningRecord:
        record = record.model_copy(update={"id": record.id or str(uuid.uuid4())})
        self._earnings[record.id] = record
        logger.info("earning_recorded", record_id=record.id, user_id=record.user_id)
        return record

    async def delete_earning(self, record_id: str) -> None:
        if record_id not in self._earnings:
            raise KeyError(f"Earning {record_id} not found")
        del self._earnings[record_id]
        logger.info("earning_deleted", record_id=record_id)

    async def add_day_status(self, record: DayStatusRecord) -> DayStatusRecord:
        record = record.model_copy(update={"id": record.id or str(uuid.uuid4())})
        self._statuses[record.id] = record
        return record

    async def add_work_slot(self, record: WorkSlotRecord) -> WorkSlotRecord:
        record = record.model_copy(update={"id": record.id or str(uuid.uuid4())})
        self._slots[record.id] = record
        return record

    async def add_referral(self, record: ReferralRecord) -> ReferralRecord:
        record = record.model_copy(update={"id": record.id or str(uuid.uuid4())})
        self._referrals[record.id] = record
        return record

    async def save_rating_snapshot(self, snapshot: RatingData) -> None:
        self._snapshots[snapshot.user_id] = snapshot

    # --- Reads ---

    async def fetch_earnings(
        self,
        user_id: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[EarningRecord]:
        return [
            r
            for r in self._earnings.values()
            if (user_id is None or user_id == r.user_id or user_id in resolve_participants(r))
            and _in_range(r.date, date_from, date_to)
        ]

    async def fetch_day_statuses(self, user_id: str | None = None) -> list[DayStatusRecord]:
        return [r for r in self._statuses.values() if user_id is None or r.user_id == user_id]

    async def fetch_work_slots(self, user_id: str | None = None) -> list[WorkSlotRecord]:
        return [r for r in self._slots.values() if user_id is None or r.user_id == user_id]

    async def fetch_referrals(
        self,
        owner_id: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[ReferralRecord]:
        return [
            r
            for r in self._referrals.values()
            if (owner_id is None or r.owner_id == owner_id)
            and _in_range(r.created_at.date(), date_from, date_to)
        ]

    async def fetch_rating_snapshot(self, user_id: str) -> RatingData | None:
        return self._snapshots.get(user_id)


_store = InMemoryRecordStore()


def get_record_store() -> InMemoryRecordStore:
    return _store
