"""Attendance aggregation.

Reduces raw day-status records to per-type day counts clipped to a window.
Overlapping records of the same type are counted independently, so a day
covered by two sick-leave records counts twice.
"""

from collections.abc import Iterable
from datetime import date

import structlog

from src.domains.calendar.models import DateWindow
from src.domains.calendar.periods import count_days_in_window

from .models import DayStatusRecord, DayStatusType

logger = structlog.get_logger()


def resolve_end_date(record: DayStatusRecord) -> date:
    """Interval end; a missing or inverted end collapses to a single day."""
    if record.end_date is None:
        return record.date
    if record.end_date < record.date:
        logger.warning(
            "day_status_end_date_normalized",
            record_id=record.id,
            user_id=record.user_id,
            date=record.date.isoformat(),
            end_date=record.end_date.isoformat(),
        )
        return record.date
    return record.end_date


def statuses_in_window(
    records: Iterable[DayStatusRecord], user_id: str, window: DateWindow
) -> list[DayStatusRecord]:
    return [
        r
        for r in records
        if r.user_id == user_id and window.overlaps(r.date, resolve_end_date(r))
    ]


def count_by_type(
    records: Iterable[DayStatusRecord], user_id: str, window: DateWindow
) -> dict[DayStatusType, int]:
    """Days per status type for ``user_id`` inside ``window``.

    Every type is present in the result, with 0 when the member has no
    matching record.
    """
    counts = {status: 0 for status in DayStatusType}
    for record in statuses_in_window(records, user_id, window):
        counts[record.type] += count_days_in_window(
            record.date, resolve_end_date(record), window
        )
    return counts


def days_of_type(
    records: Iterable[DayStatusRecord],
    user_id: str,
    window: DateWindow,
    status: DayStatusType,
) -> int:
    return count_by_type(records, user_id, window)[status]
