"""Pydantic models for day statuses and work slots."""

import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from src.domains.calendar.models import DateWindow


class DayStatusType(StrEnum):
    DAYOFF = "dayoff"
    SICK = "sick"
    VACATION = "vacation"
    ABSENCE = "absence"
    TRUANCY = "truancy"
    INTERNSHIP = "internship"


class DayStatusRecord(BaseModel):
    """A member's non-standard status over ``[date, end_date]``.

    Without ``end_date`` the status covers ``date`` alone.
    """

    id: str = ""
    user_id: str
    type: DayStatusType
    date: datetime.date
    end_date: datetime.date | None = None


class TimeSlot(BaseModel):
    start: datetime.time
    end: datetime.time


class WorkSlotRecord(BaseModel):
    id: str = ""
    user_id: str
    date: datetime.date
    slots: list[TimeSlot] = Field(default_factory=list)


class AttendanceRequest(BaseModel):
    user_id: str
    records: list[DayStatusRecord]
    window: DateWindow
