"""Attendance aggregation API endpoint."""

from fastapi import APIRouter

from src.domains.attendance.models import AttendanceRequest
from src.domains.operations import aggregate_attendance

router = APIRouter(prefix="/api/v1/attendance", tags=["attendance"])


@router.post("/aggregate")
async def aggregate(request: AttendanceRequest) -> dict:
    counts = aggregate_attendance(request.records, request.user_id, request.window)
    return {
        "user_id": request.user_id,
        "window": request.window.model_dump(mode="json"),
        "days": {status.value: days for status, days in counts.items()},
    }
