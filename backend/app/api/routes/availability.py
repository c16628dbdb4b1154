"""
Availability: an expert's weekly windows and the free start times for a service on a date.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.constants import MAX_DAY_OF_WEEK, MIN_DAY_OF_WEEK, TIME_PATTERN
from app.db.session import get_db
from app.services.auth import AuthUser
from app.services.availability_service import get_availability, get_available_slots, set_availability
from app.services.scheduling import AvailabilityWindow

router = APIRouter()


class AvailabilityWindowBody(BaseModel):
    day_of_week: int = Field(..., ge=MIN_DAY_OF_WEEK, le=MAX_DAY_OF_WEEK, description="0 = Sunday")
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)


class SetAvailabilityBody(BaseModel):
    availability: list[AvailabilityWindowBody]


@router.get("/availability/{expert_id}")
def list_availability(expert_id: str, db: Session = Depends(get_db)):
    """Expert's windows ordered by day_of_week, start_time."""
    return get_availability(db, expert_id)


@router.post("/availability")
def save_availability(
    body: SetAvailabilityBody,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace all of the caller's windows with the submitted list (400 if any window ends before it starts)."""
    windows = [
        AvailabilityWindow(day_of_week=w.day_of_week, start_time=w.start_time, end_time=w.end_time)
        for w in body.availability
    ]
    return set_availability(db, user.id, windows)


@router.get("/availability/{expert_id}/{service_id}/{date}")
def list_available_slots(expert_id: str, service_id: int, date: str, db: Session = Depends(get_db)) -> list[str]:
    """
    Bookable start times (HH:MM) for the service on `date` (YYYY-MM-DD).
    Empty when the expert has no windows that weekday or the service is unknown.
    Overlapping windows can repeat a time.
    """
    return get_available_slots(db, expert_id, service_id, date)
