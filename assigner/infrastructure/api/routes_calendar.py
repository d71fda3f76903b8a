"""Calendar endpoint — working-day checks against a holiday set."""

from fastapi import APIRouter, HTTPException

from assigner.domain.policies.calendar import (
    SATURDAY_SUNDAY,
    is_working_day,
    next_working_day,
)
from assigner.infrastructure.api.schemas import WorkingDayRequest

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.post("/working-day")
async def working_day(body: WorkingDayRequest):
    """Is the date a working day, and which working day comes next."""
    weekend = frozenset(body.weekend_days) if body.weekend_days is not None else SATURDAY_SUNDAY
    try:
        following = next_working_day(body.day, body.holidays, weekend)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "date": body.day.isoformat(),
        "is_working_day": is_working_day(body.day, body.holidays, weekend),
        "next_working_day": following.isoformat(),
    }
