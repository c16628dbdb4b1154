"""
Centralized constants for booking, roles and slot generation.

Change status names or the slot step here instead of scattering literals across routes and services.
"""

# Slot generator walks each availability window in fixed steps of this many minutes
SLOT_STEP_MINUTES = 30

# Wire formats: booking_date is YYYY-MM-DD, every time field is HH:MM (24-hour, zero padded)
TIME_PATTERN = r"^\d{2}:\d{2}$"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Day of week convention: 0 = Sunday ... 6 = Saturday
MIN_DAY_OF_WEEK = 0
MAX_DAY_OF_WEEK = 6

# Booking status (cancellation is a status change, rows are never deleted)
BOOKING_STATUS_CONFIRMED = "confirmed"
BOOKING_STATUS_CANCELLED = "cancelled"
BOOKING_STATUSES = (BOOKING_STATUS_CONFIRMED, BOOKING_STATUS_CANCELLED)

# User roles
ROLE_USER = "user"
ROLE_EXPERT = "expert"
ROLE_PATTERN = f"^({ROLE_USER}|{ROLE_EXPERT})$"

# Partial unique index on confirmed (expert_id, booking_date, booking_time)
BOOKING_CONFIRMED_SLOT_INDEX = "uq_bookings_confirmed_slot"
