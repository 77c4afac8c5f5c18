"""Hours worked from scheduled work slots."""

from collections.abc import Iterable
from datetime import date, datetime

from src.domains.calendar.models import DateWindow

from .models import TimeSlot, WorkSlotRecord


def slot_hours(slot: TimeSlot) -> float:
    """Length of a same-day slot in hours; inverted or empty slots count as 0."""
    start = datetime.combine(date.min, slot.start)
    end = datetime.combine(date.min, slot.end)
    seconds = (end - start).total_seconds()
    return max(seconds, 0.0) / 3600


def day_hours(slots: Iterable[TimeSlot]) -> float:
    return sum(slot_hours(s) for s in slots)


def hours_in_window(
    records: Iterable[WorkSlotRecord], user_id: str, window: DateWindow
) -> float:
    """Total hours for ``user_id`` over every slot record dated inside ``window``.

    Several records for the same day are all counted.
    """
    return sum(
        day_hours(r.slots)
        for r in records
        if r.user_id == user_id and window.contains(r.date)
    )
