"""Scheduling: slot generation over weekly availability windows."""
from app.services.scheduling.slots import (
    compute_available_slots,
    day_of_week,
    format_hhmm,
    normalize_hhmm,
    parse_booking_date,
    parse_hhmm,
)
from app.services.scheduling.types import AvailabilityWindow

__all__ = [
    "AvailabilityWindow",
    "compute_available_slots",
    "day_of_week",
    "format_hhmm",
    "normalize_hhmm",
    "parse_booking_date",
    "parse_hhmm",
]
