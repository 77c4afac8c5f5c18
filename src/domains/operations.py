"""Dashboard-facing operations.

Thin entry points over the domain packages, one per dashboard use: rating a
member, splitting an earning, aggregating attendance, the two earnings
leaderboards and the roster totals. All of them are synchronous and
side-effect free.
"""

from collections.abc import Iterable

from src.domains.attendance.aggregator import count_by_type
from src.domains.attendance.models import DayStatusRecord, DayStatusType
from src.domains.calendar.models import DateWindow
from src.domains.earnings.models import (
    CategoryRollup,
    ContributorRanking,
    EarningRecord,
    EarningSplit,
    TeamTotals,
)
from src.domains.earnings.rollup import category_breakdown, contributor_ranking, team_totals
from src.domains.earnings.splitter import split_earning as _split
from src.domains.rating.engine import RatingEngine
from src.domains.rating.models import RatingData, RatingResult

_engine = RatingEngine()


def compute_rating(
    user_id: str,
    snapshot: RatingData | None,
    weekly_hours: float,
    weekly_net_earnings: float,
    weekly_days_off: float,
    weekly_sick_days: float,
    vacation_days_last_90: float,
    engine: RatingEngine | None = None,
) -> RatingResult:
    return (engine or _engine).score(
        user_id,
        snapshot,
        weekly_hours=weekly_hours,
        weekly_net_earnings=weekly_net_earnings,
        weekly_days_off=weekly_days_off,
        weekly_sick_days=weekly_sick_days,
        vacation_days_last_90=vacation_days_last_90,
    )


def split_earning(record: EarningRecord, pool_rate: float | None = None) -> EarningSplit:
    return _split(record, pool_rate)


def aggregate_attendance(
    records: Iterable[DayStatusRecord], user_id: str, window: DateWindow
) -> dict[DayStatusType, int]:
    return count_by_type(records, user_id, window)


def rollup_categories(
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    pool_rate: float | None = None,
) -> list[CategoryRollup]:
    return category_breakdown(records, window, pool_rate=pool_rate)


def rollup_contributors(
    members: Iterable[str],
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    pool_rate: float | None = None,
) -> list[ContributorRanking]:
    return contributor_ranking(members, records, window, pool_rate)


def rollup_team_totals(
    members: Iterable[str],
    records: Iterable[EarningRecord],
    window: DateWindow | None = None,
    pool_rate: float | None = None,
) -> TeamTotals:
    return team_totals(members, records, window, pool_rate)
