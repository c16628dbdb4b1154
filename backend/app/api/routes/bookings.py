"""
Bookings: create (conflict guarded), cancel, and list for the expert or the booking user.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.constants import DATE_PATTERN, TIME_PATTERN
from app.db.session import get_db
from app.services.auth import AuthUser
from app.services.booking_service import (
    attempt_booking,
    cancel_booking,
    list_expert_bookings,
    list_user_bookings,
)

router = APIRouter()


class CreateBookingBody(BaseModel):
    expert_id: str = Field(..., min_length=1)
    service_id: int
    booking_date: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    booking_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM")


@router.get("/bookings/expert")
def bookings_for_expert(user: AuthUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Confirmed bookings where the caller is the expert, by date then time."""
    return list_expert_bookings(db, user.id)


@router.get("/bookings/user")
def bookings_for_user(user: AuthUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Confirmed bookings the caller made, by date then time."""
    return list_user_bookings(db, user.id)


@router.post("/bookings")
def create_booking(
    body: CreateBookingBody,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Book a slot. 400 {"error": "Time slot is already booked"} when a confirmed booking holds it."""
    return attempt_booking(
        db,
        user_id=user.id,
        expert_id=body.expert_id,
        service_id=body.service_id,
        booking_date=body.booking_date,
        booking_time=body.booking_time,
    )


@router.delete("/bookings/{booking_id}")
def delete_booking(
    booking_id: int,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Cancel one of the caller's bookings (status -> cancelled)."""
    return cancel_booking(db, user.id, booking_id)
