"""Shared test fixtures for the team KPI engine tests."""

from datetime import date, datetime, time

import pytest

from src.domains.attendance.models import (
    DayStatusRecord,
    DayStatusType,
    TimeSlot,
    WorkSlotRecord,
)
from src.domains.earnings.models import EarningCategory, EarningRecord
from src.domains.rating.models import RatingData, ReferralRecord
from src.store.memory import InMemoryRecordStore

# Wednesday; its Monday-based week is 2025-01-13..2025-01-19
TODAY = date(2025, 1, 15)


def make_earning(
    amount: float,
    user_id: str = "alice",
    participants: list[str] | None = None,
    pool_amount: float | None = None,
    day: date = TODAY,
    category: EarningCategory = EarningCategory.FUTURES,
    record_id: str = "",
) -> EarningRecord:
    return EarningRecord(
        id=record_id,
        user_id=user_id,
        date=day,
        category=category,
        amount=amount,
        pool_amount=pool_amount,
        participants=participants or [],
    )


def make_status(
    status: DayStatusType,
    start: date,
    end: date | None = None,
    user_id: str = "alice",
) -> DayStatusRecord:
    return DayStatusRecord(user_id=user_id, type=status, date=start, end_date=end)


def make_slots(day: date, *spans: tuple[int, int], user_id: str = "alice") -> WorkSlotRecord:
    return WorkSlotRecord(
        user_id=user_id,
        date=day,
        slots=[TimeSlot(start=time(s), end=time(e)) for s, e in spans],
    )


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def populated_store() -> InMemoryRecordStore:
    """Alice's records around TODAY, covering every window the refresh uses."""
    store = InMemoryRecordStore()
    store._earnings["e-1"] = make_earning(1000.0, record_id="e-1", day=date(2025, 1, 14))
    store._slots["s-1"] = make_slots(date(2025, 1, 13), (9, 17))
    store._slots["s-2"] = make_slots(date(2025, 1, 14), (9, 17))
    store._statuses["d-1"] = make_status(
        DayStatusType.SICK, date(2025, 1, 10), date(2025, 1, 14)
    )
    store._statuses["d-2"] = make_status(
        DayStatusType.VACATION, date(2024, 11, 1), date(2024, 11, 20)
    )
    store._statuses["d-3"] = make_status(DayStatusType.DAYOFF, date(2025, 1, 15))
    store._referrals["r-1"] = ReferralRecord(
        id="r-1", owner_id="alice", created_at=datetime(2025, 1, 5, 12, 0)
    )
    store._snapshots["alice"] = RatingData(user_id="alice", messages=150, rating=40.0)
    return store
