"""Rebuilds a member's rating snapshot from raw records."""

from collections.abc import Iterable
from datetime import UTC, datetime

from src.domains.attendance.aggregator import count_by_type
from src.domains.attendance.models import DayStatusRecord, DayStatusType
from src.domains.calendar.models import DateWindow
from src.domains.earnings.models import EarningRecord
from src.domains.earnings.rollup import earnings_summary

from .models import ManualCounters, RatingData, ReferralRecord


def manual_counters_from(previous: RatingData | None) -> ManualCounters:
    """Counters that only exist on the stored snapshot; zero for a new member."""
    if previous is None:
        return ManualCounters()
    return ManualCounters(
        messages=previous.messages,
        initiatives=previous.initiatives,
        signals=previous.signals,
        profitable_signals=previous.profitable_signals,
    )


def count_referrals(
    referrals: Iterable[ReferralRecord], owner_id: str, window: DateWindow
) -> int:
    return sum(
        1 for r in referrals if r.owner_id == owner_id and window.contains(r.created_at.date())
    )


def build_rating_snapshot(
    user_id: str,
    counters: ManualCounters,
    earnings: Iterable[EarningRecord],
    statuses: Iterable[DayStatusRecord],
    referrals: Iterable[ReferralRecord],
    window: DateWindow,
    pool_rate: float | None = None,
    now: datetime | None = None,
) -> RatingData:
    """Fresh snapshot for ``user_id`` over ``window``.

    Earnings hold the member's gross share and pool share; day counts come
    from the attendance aggregator; ``counters`` are copied through as is.
    The stored rating is left at zero for the engine to fill in.
    """
    summary = earnings_summary(earnings, user_id, window, pool_rate)
    days = count_by_type(statuses, user_id, window)

    return RatingData(
        user_id=user_id,
        earnings=summary.gross,
        pool_amount=summary.pool,
        messages=counters.messages,
        initiatives=counters.initiatives,
        signals=counters.signals,
        profitable_signals=counters.profitable_signals,
        referrals=count_referrals(referrals, user_id, window),
        days_off=days[DayStatusType.DAYOFF],
        sick_days=days[DayStatusType.SICK],
        vacation_days=days[DayStatusType.VACATION],
        absence_days=days[DayStatusType.ABSENCE],
        truancy_days=days[DayStatusType.TRUANCY],
        internship_days=days[DayStatusType.INTERNSHIP],
        last_updated=now or datetime.now(UTC),
    )
