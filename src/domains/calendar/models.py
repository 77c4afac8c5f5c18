"""Date window model shared by every aggregation."""

from datetime import date

from pydantic import BaseModel


class DateWindow(BaseModel):
    """Inclusive calendar range ``[start, end]``.

    A window whose ``end`` precedes ``start`` is empty: it contains no days
    and overlaps nothing.
    """

    start: date
    end: date

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    @property
    def days(self) -> int:
        if self.is_empty:
            return 0
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, start: date, end: date) -> bool:
        if self.is_empty:
            return False
        return start <= self.end and end >= self.start
