"""
Expert availability: weekly windows (full replacement on save) and free slots for a date.
"""
import logging

from sqlalchemy.orm import Session

from app.core.constants import BOOKING_STATUS_CONFIRMED
from app.models.availability import Availability
from app.models.booking import Booking
from app.models.service import Service
from app.services.scheduling import (
    AvailabilityWindow,
    compute_available_slots,
    day_of_week,
    parse_booking_date,
)

logger = logging.getLogger(__name__)


def _availability_to_dict(r: Availability) -> dict:
    return {
        "id": r.id,
        "expert_id": r.expert_id,
        "day_of_week": r.day_of_week,
        "start_time": r.start_time,
        "end_time": r.end_time,
        "created_at": r.created_at.isoformat() if r.created_at else None,
        "updated_at": r.updated_at.isoformat() if r.updated_at else None,
    }


def get_availability(db: Session, expert_id: str) -> list[dict]:
    """All windows for the expert, ordered by day_of_week then start_time."""
    rows = (
        db.query(Availability)
        .filter(Availability.expert_id == expert_id)
        .order_by(Availability.day_of_week, Availability.start_time)
        .all()
    )
    return [_availability_to_dict(r) for r in rows]


def set_availability(db: Session, expert_id: str, windows: list[AvailabilityWindow]) -> dict:
    """
    Replace the expert's availability with `windows` (delete all, insert all, one commit).
    Every window is validated before anything is deleted; duplicates are kept as given.
    """
    validated = [w.validate() for w in windows]
    deleted = db.query(Availability).filter(Availability.expert_id == expert_id).delete(synchronize_session=False)
    db.add_all(Availability(expert_id=expert_id, **w.to_row()) for w in validated)
    db.commit()
    logger.info(
        "Replaced availability for expert=%s: removed=%s inserted=%s", expert_id, deleted, len(validated)
    )
    return {"success": True}


def get_available_slots(db: Session, expert_id: str, service_id: int, date_str: str) -> list[str]:
    """
    Free start times (HH:MM) for one expert, service and date.
    No windows that weekday or unknown service -> [] (not an error).
    """
    day = parse_booking_date(date_str)
    rows = (
        db.query(Availability)
        .filter(Availability.expert_id == expert_id, Availability.day_of_week == day_of_week(day))
        .order_by(Availability.id)
        .all()
    )
    if not rows:
        return []
    service = db.query(Service).filter(Service.id == service_id).first()
    if not service:
        return []
    booked = (
        db.query(Booking.booking_time)
        .filter(
            Booking.expert_id == expert_id,
            Booking.booking_date == day.isoformat(),
            Booking.status == BOOKING_STATUS_CONFIRMED,
        )
        .all()
    )
    return compute_available_slots(
        [AvailabilityWindow.from_row(r) for r in rows],
        service.duration,
        {t for (t,) in booked},
    )
