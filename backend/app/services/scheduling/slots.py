"""
Slot generation: free appointment start times for one expert on one date.

Each availability window is walked independently from start_time in SLOT_STEP_MINUTES
steps; a candidate is kept when the whole service fits before end_time and its HH:MM
label is not already booked. Windows are not merged, so overlapping windows emit the
same label more than once.
"""
import re
from collections.abc import Iterable
from datetime import date

from app.core.constants import SLOT_STEP_MINUTES
from app.core.errors import ValidationError

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_hhmm(value: str) -> int:
    """Parse HH:MM (seconds tolerated and dropped) into minutes since midnight."""
    m = _TIME_RE.match((value or "").strip()) if isinstance(value, str) else None
    if not m:
        raise ValidationError(f"Invalid time {value!r}. Use HH:MM.")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise ValidationError(f"Invalid time {value!r}. Use HH:MM.")
    return hours * 60 + minutes


def format_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_hhmm(value: str) -> str:
    """Canonical HH:MM form of a time string (e.g. '10:00:00' -> '10:00')."""
    return format_hhmm(parse_hhmm(value))


def parse_booking_date(value: str) -> date:
    """Parse YYYY-MM-DD. Raises ValidationError for anything else."""
    s = (value or "").strip() if isinstance(value, str) else ""
    if not _DATE_RE.match(s):
        raise ValidationError(f"Invalid date {value!r}. Use YYYY-MM-DD.")
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}. Use YYYY-MM-DD.") from None


def day_of_week(day: date) -> int:
    """0 = Sunday ... 6 = Saturday (ISO weekday mapped onto the Sunday-first convention)."""
    return day.isoweekday() % 7


def compute_available_slots(
    windows: Iterable,
    service_duration_minutes: int,
    booked_times: Iterable[str],
) -> list[str]:
    """
    Return bookable start times (HH:MM) for the given windows.

    windows: objects with start_time / end_time (HH:MM), already filtered to the date's weekday.
    service_duration_minutes: positive appointment length.
    booked_times: times already confirmed for this expert and date.

    Order follows the windows as supplied, ascending within each window. Pure function.
    """
    if isinstance(service_duration_minutes, bool) or not isinstance(service_duration_minutes, int):
        raise ValidationError("Service duration must be a whole number of minutes.")
    if service_duration_minutes <= 0:
        raise ValidationError("Service duration must be positive.")
    booked = {normalize_hhmm(t) for t in booked_times}

    slots: list[str] = []
    for window in windows:
        start = parse_hhmm(window.start_time)
        end = parse_hhmm(window.end_time)
        current = start
        while current < end:
            if current + service_duration_minutes <= end:
                label = format_hhmm(current)
                if label not in booked:
                    slots.append(label)
            current += SLOT_STEP_MINUTES
    return slots
