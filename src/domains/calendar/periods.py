"""Period calendar: week, month and look-back windows plus overlap counting.

All functions are pure. Callers that need "today" can pass it explicitly;
otherwise the local date at call time is used.
"""

from datetime import date, timedelta

from .models import DateWindow


def _today(today: date | None) -> date:
    return today if today is not None else date.today()


def week_range(reference: date | None = None, week_start: int = 0) -> DateWindow:
    """Return the 7-day week containing ``reference``.

    ``week_start`` follows ``date.weekday()`` numbering (0 = Monday).
    """
    ref = _today(reference)
    offset = (ref.weekday() - week_start) % 7
    start = ref - timedelta(days=offset)
    return DateWindow(start=start, end=start + timedelta(days=6))


def last_n_days_range(n: int, today: date | None = None) -> DateWindow:
    """Return ``[today - n days, today]``, both ends inclusive."""
    end = _today(today)
    return DateWindow(start=end - timedelta(days=max(n, 0)), end=end)


def month_range(reference: date | None = None) -> DateWindow:
    """Return the calendar month containing ``reference``."""
    ref = _today(reference)
    start = ref.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return DateWindow(start=start, end=next_month - timedelta(days=1))


def count_days_in_period(
    interval_start: date,
    interval_end: date | None,
    window_start: date,
    window_end: date,
) -> int:
    """Number of calendar days shared by an interval and a window.

    A missing ``interval_end`` means a single-day interval. Disjoint ranges,
    and ranges whose end precedes their start, share zero days.
    """
    end = interval_end if interval_end is not None else interval_start
    lo = max(interval_start, window_start)
    hi = min(end, window_end)
    if hi < lo:
        return 0
    return (hi - lo).days + 1


def count_days_in_window(interval_start: date, interval_end: date | None, window: DateWindow) -> int:
    return count_days_in_period(interval_start, interval_end, window.start, window.end)
