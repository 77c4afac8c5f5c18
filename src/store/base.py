"""Persistence port consumed by the rating service.

Any document store can back the service as long as it provides these
coroutines. Errors raised by an implementation propagate unchanged.
"""

from datetime import date
from typing import Protocol

from src.domains.attendance.models import DayStatusRecord, WorkSlotRecord
from src.domains.earnings.models import EarningRecord
from src.domains.rating.models import RatingData, ReferralRecord


class RecordStore(Protocol):
    async def fetch_earnings(
        self,
        user_id: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[EarningRecord]: ...

    async def fetch_day_statuses(self, user_id: str | None = None) -> list[DayStatusRecord]: ...

    async def fetch_work_slots(self, user_id: str | None = None) -> list[WorkSlotRecord]: ...

    async def fetch_referrals(
        self,
        owner_id: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[ReferralRecord]: ...

    async def fetch_rating_snapshot(self, user_id: str) -> RatingData | None: ...

    async def save_rating_snapshot(self, snapshot: RatingData) -> None: ...
