"""Value types for scheduling. Independent of the ORM so the slot generator stays pure."""
from typing import Any

from app.core.constants import MAX_DAY_OF_WEEK, MIN_DAY_OF_WEEK
from app.core.errors import ValidationError
from app.services.scheduling.slots import normalize_hhmm, parse_hhmm


class AvailabilityWindow:
    """One weekly window: day_of_week (0 = Sunday) with HH:MM start and end on the same day."""

    __slots__ = ("day_of_week", "start_time", "end_time")

    def __init__(self, *, day_of_week: int, start_time: str, end_time: str):
        self.day_of_week = day_of_week
        self.start_time = start_time
        self.end_time = end_time

    def __repr__(self) -> str:
        return f"AvailabilityWindow({self.day_of_week}, {self.start_time}-{self.end_time})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvailabilityWindow):
            return NotImplemented
        return self.to_row() == other.to_row()

    @classmethod
    def from_row(cls, row: Any) -> "AvailabilityWindow":
        return cls(day_of_week=row.day_of_week, start_time=row.start_time, end_time=row.end_time)

    def validate(self) -> "AvailabilityWindow":
        """Return a normalized copy; raise ValidationError for bad day, bad times, or end <= start."""
        if isinstance(self.day_of_week, bool) or not isinstance(self.day_of_week, int):
            raise ValidationError("day_of_week must be an integer 0-6.")
        if not MIN_DAY_OF_WEEK <= self.day_of_week <= MAX_DAY_OF_WEEK:
            raise ValidationError(f"day_of_week must be between {MIN_DAY_OF_WEEK} and {MAX_DAY_OF_WEEK}.")
        start = parse_hhmm(self.start_time)
        end = parse_hhmm(self.end_time)
        if end <= start:
            # Windows spanning midnight are not supported
            raise ValidationError(
                f"end_time {self.end_time} must be after start_time {self.start_time}."
            )
        return AvailabilityWindow(
            day_of_week=self.day_of_week,
            start_time=normalize_hhmm(self.start_time),
            end_time=normalize_hhmm(self.end_time),
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "day_of_week": self.day_of_week,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }
