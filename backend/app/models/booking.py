"""
Bookings. Cancellation flips status to 'cancelled' (soft state, no deletes).

At most one confirmed row per (expert_id, booking_date, booking_time): enforced by a
partial unique index in addition to the check in booking_service.attempt_booking.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.constants import BOOKING_CONFIRMED_SLOT_INDEX
from app.db.base import Base

_CONFIRMED_ONLY = text("status = 'confirmed'")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    expert_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False)
    booking_date = Column(String(10), nullable=False)  # YYYY-MM-DD
    booking_time = Column(String(5), nullable=False)  # HH:MM
    status = Column(String(16), nullable=False, server_default="confirmed")  # confirmed | cancelled
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    service = relationship("Service", lazy="joined")
    user = relationship("User", foreign_keys=[user_id], lazy="joined")
    expert = relationship("User", foreign_keys=[expert_id], lazy="joined")

    __table_args__ = (
        Index(
            BOOKING_CONFIRMED_SLOT_INDEX,
            "expert_id",
            "booking_date",
            "booking_time",
            unique=True,
            postgresql_where=_CONFIRMED_ONLY,
            sqlite_where=_CONFIRMED_ONLY,
        ),
    )
