"""
Bookings: conflict-guarded create, soft cancel, and per-expert / per-user listings.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.constants import (
    BOOKING_CONFIRMED_SLOT_INDEX,
    BOOKING_STATUS_CANCELLED,
    BOOKING_STATUS_CONFIRMED,
)
from app.core.errors import SlotAlreadyBooked
from app.models.booking import Booking
from app.services.scheduling import normalize_hhmm, parse_booking_date

logger = logging.getLogger(__name__)


def booking_to_dict(b: Booking) -> dict:
    return {
        "id": b.id,
        "user_id": b.user_id,
        "expert_id": b.expert_id,
        "service_id": b.service_id,
        "booking_date": b.booking_date,
        "booking_time": b.booking_time,
        "status": b.status,
        "created_at": b.created_at.isoformat() if b.created_at else None,
        "updated_at": b.updated_at.isoformat() if b.updated_at else None,
    }


def _has_confirmed_booking(db: Session, expert_id: str, booking_date: str, booking_time: str) -> bool:
    return (
        db.query(Booking.id)
        .filter(
            Booking.expert_id == expert_id,
            Booking.booking_date == booking_date,
            Booking.booking_time == booking_time,
            Booking.status == BOOKING_STATUS_CONFIRMED,
        )
        .first()
        is not None
    )


def _is_slot_conflict(exc: IntegrityError) -> bool:
    """True when the insert hit the confirmed-slot unique index (Postgres names it; SQLite lists the columns)."""
    msg = str(exc.orig).lower()
    return BOOKING_CONFIRMED_SLOT_INDEX in msg or "bookings.expert_id, bookings.booking_date" in msg


def attempt_booking(
    db: Session,
    *,
    user_id: str,
    expert_id: str,
    service_id: int,
    booking_date: str,
    booking_time: str,
) -> dict:
    """
    Create a confirmed booking unless the (expert, date, time) slot is already taken.

    The read below gives the friendly SlotAlreadyBooked error; the partial unique index on
    confirmed rows catches a concurrent request that passed the same read.
    """
    date_str = parse_booking_date(booking_date).isoformat()
    time_str = normalize_hhmm(booking_time)
    if _has_confirmed_booking(db, expert_id, date_str, time_str):
        logger.info("Slot taken expert=%s date=%s time=%s", expert_id, date_str, time_str)
        raise SlotAlreadyBooked()

    row = Booking(
        user_id=user_id,
        expert_id=expert_id,
        service_id=service_id,
        booking_date=date_str,
        booking_time=time_str,
        status=BOOKING_STATUS_CONFIRMED,
    )
    db.add(row)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not _is_slot_conflict(e):
            raise
        logger.warning("Concurrent booking lost on unique index expert=%s date=%s time=%s", expert_id, date_str, time_str)
        raise SlotAlreadyBooked() from None
    db.refresh(row)
    logger.info("Booked id=%s user=%s expert=%s %s %s", row.id, user_id, expert_id, date_str, time_str)
    return booking_to_dict(row)


def cancel_booking(db: Session, user_id: str, booking_id: int) -> dict:
    """Mark the caller's booking cancelled (row kept). Frees the slot for new bookings."""
    updated = (
        db.query(Booking)
        .filter(Booking.id == booking_id, Booking.user_id == user_id)
        .update({Booking.status: BOOKING_STATUS_CANCELLED}, synchronize_session=False)
    )
    db.commit()
    if updated:
        logger.info("Cancelled booking id=%s user=%s", booking_id, user_id)
    return {"success": True}


def _confirmed_query(db: Session):
    return db.query(Booking).filter(Booking.status == BOOKING_STATUS_CONFIRMED).order_by(
        Booking.booking_date, Booking.booking_time
    )


def list_expert_bookings(db: Session, expert_id: str) -> list[dict]:
    """Confirmed bookings for an expert with service_name and the booking user's name."""
    rows = _confirmed_query(db).filter(Booking.expert_id == expert_id).all()
    return [
        {
            **booking_to_dict(b),
            "service_name": b.service.name if b.service else None,
            "user_name": b.user.name if b.user else None,
        }
        for b in rows
    ]


def list_user_bookings(db: Session, user_id: str) -> list[dict]:
    """Confirmed bookings made by a user with service_name and expert_name."""
    rows = _confirmed_query(db).filter(Booking.user_id == user_id).all()
    return [
        {
            **booking_to_dict(b),
            "service_name": b.service.name if b.service else None,
            "expert_name": b.expert.name if b.expert else None,
        }
        for b in rows
    ]
