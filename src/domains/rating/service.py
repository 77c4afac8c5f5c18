"""Rating refresh pipeline for a single member.

Fetches the member's records, reduces them over the week, snapshot and
90-day windows, scores the result and overwrites the stored snapshot. The
monthly earnings summary covers the calendar month containing ``today``.
Nothing is cached between refreshes.
"""

from datetime import UTC, date, datetime

import structlog

from src.config import settings
from src.domains.attendance.aggregator import count_by_type, days_of_type
from src.domains.attendance.models import DayStatusType
from src.domains.attendance.worktime import hours_in_window
from src.domains.calendar.periods import last_n_days_range, month_range, week_range
from src.domains.earnings.config import EarningsConfig
from src.domains.earnings.config import default_config as default_earnings_config
from src.domains.earnings.rollup import earnings_summary, filter_records, per_member_net
from src.store.base import RecordStore

from .engine import RatingEngine
from .models import MemberRatingReport
from .snapshot import build_rating_snapshot, manual_counters_from

logger = structlog.get_logger()


class RatingService:
    def __init__(
        self,
        store: RecordStore,
        engine: RatingEngine | None = None,
        earnings_config: EarningsConfig | None = None,
    ) -> None:
        self._store = store
        self._engine = engine or RatingEngine()
        self._earnings_config = earnings_config or default_earnings_config

    async def refresh(self, user_id: str, today: date | None = None) -> MemberRatingReport:
        today = today or date.today()
        pool_rate = self._earnings_config.pool_rate

        week = week_range(today, settings.week_start)
        month = last_n_days_range(settings.snapshot_window_days, today)
        quarter = last_n_days_range(settings.vacation_window_days, today)
        calendar_month = month_range(today)

        earnings = await self._store.fetch_earnings(
            user_id,
            min(week.start, month.start, calendar_month.start),
            max(week.end, month.end, calendar_month.end),
        )
        statuses = await self._store.fetch_day_statuses(user_id)
        slots = await self._store.fetch_work_slots(user_id)
        referrals = await self._store.fetch_referrals(user_id, month.start, month.end)
        previous = await self._store.fetch_rating_snapshot(user_id)

        week_earnings = filter_records(earnings, week)
        weekly_net = per_member_net(week_earnings, user_id, pool_rate)
        weekly_hours = hours_in_window(slots, user_id, week)
        weekly_days = count_by_type(statuses, user_id, week)
        vacation_90 = days_of_type(statuses, user_id, quarter, DayStatusType.VACATION)

        snapshot = build_rating_snapshot(
            user_id,
            manual_counters_from(previous),
            earnings,
            statuses,
            referrals,
            month,
            pool_rate=pool_rate,
        )
        result = self._engine.score(
            user_id,
            snapshot,
            weekly_hours=weekly_hours,
            weekly_net_earnings=weekly_net,
            weekly_days_off=weekly_days[DayStatusType.DAYOFF],
            weekly_sick_days=weekly_days[DayStatusType.SICK],
            vacation_days_last_90=vacation_90,
        )
        snapshot = snapshot.model_copy(update={"rating": float(result.rating)})
        await self._store.save_rating_snapshot(snapshot)

        logger.info(
            "rating_snapshot_refreshed",
            user_id=user_id,
            rating=snapshot.rating,
            week_start=week.start.isoformat(),
            had_previous=previous is not None,
        )

        return MemberRatingReport(
            user_id=user_id,
            snapshot=snapshot,
            result=result,
            weekly_hours=weekly_hours,
            weekly_days_off=weekly_days[DayStatusType.DAYOFF],
            weekly_sick_days=weekly_days[DayStatusType.SICK],
            vacation_days_last_90=vacation_90,
            monthly_earnings=earnings_summary(earnings, user_id, calendar_month, pool_rate),
            weekly_earnings=earnings_summary(week_earnings, user_id, pool_rate=pool_rate),
            computed_at=datetime.now(UTC),
        )
