from app.services.availability_service import get_availability, get_available_slots, set_availability
from app.services.booking_service import attempt_booking, cancel_booking, list_expert_bookings, list_user_bookings

__all__ = [
    "attempt_booking",
    "cancel_booking",
    "get_availability",
    "get_available_slots",
    "list_expert_bookings",
    "list_user_bookings",
    "set_availability",
]
