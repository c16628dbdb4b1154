"""Slot generator: window walk, fit check, booked filter, and window-order output."""
from datetime import date

import pytest

from app.core.errors import ValidationError
from app.services.scheduling import (
    AvailabilityWindow,
    compute_available_slots,
    day_of_week,
    format_hhmm,
    normalize_hhmm,
    parse_booking_date,
    parse_hhmm,
)


def _window(start: str, end: str, day: int = 1) -> AvailabilityWindow:
    return AvailabilityWindow(day_of_week=day, start_time=start, end_time=end)


def test_full_day_with_one_booked_hour():
    slots = compute_available_slots([_window("09:00", "17:00")], 60, {"10:00"})

    assert "10:00" not in slots
    assert slots[0] == "09:00"
    assert slots[-1] == "16:00"  # 16:00 + 60 min ends exactly at 17:00
    for t in ["09:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00"]:
        assert t in slots
    assert "16:30" not in slots


def test_service_longer_than_window_yields_nothing():
    assert compute_available_slots([_window("09:00", "09:45")], 60, set()) == []


def test_overlapping_windows_repeat_times():
    slots = compute_available_slots([_window("09:00", "12:00"), _window("10:00", "13:00")], 30, set())

    for t in ["10:00", "10:30", "11:00", "11:30"]:
        assert slots.count(t) == 2
    assert slots.count("09:00") == 1
    assert slots.count("12:30") == 1
    # window order is kept: first window's slots come first
    assert slots[:6] == ["09:00", "09:30", "10:00", "10:30", "11:00", "11:30"]
    assert slots[6:] == ["10:00", "10:30", "11:00", "11:30", "12:00", "12:30"]


@pytest.mark.parametrize(
    "start,end,duration",
    [("09:00", "17:00", 60), ("08:00", "12:00", 30), ("13:30", "15:30", 120), ("00:00", "23:30", 90)],
)
def test_slot_count_and_spacing(start, end, duration):
    slots = compute_available_slots([_window(start, end)], duration, set())
    span = parse_hhmm(end) - parse_hhmm(start)

    assert len(slots) == (span - duration) // 30 + 1
    minutes = [parse_hhmm(s) for s in slots]
    assert all(b - a == 30 for a, b in zip(minutes, minutes[1:]))
    assert minutes[0] == parse_hhmm(start)
    assert minutes[-1] <= parse_hhmm(end) - duration


def test_no_slot_runs_past_window_end():
    # 50 min does not divide the 30 min step; trailing partial slots are dropped, not clipped
    slots = compute_available_slots([_window("09:00", "11:00")], 50, set())

    assert slots == ["09:00", "09:30", "10:00"]
    assert all(parse_hhmm(s) + 50 <= parse_hhmm("11:00") for s in slots)


def test_booked_times_are_excluded_and_seconds_ignored():
    slots = compute_available_slots([_window("09:00", "11:00")], 30, {"09:30:00", "10:00"})

    assert slots == ["09:00", "10:30"]


def test_same_inputs_same_output():
    windows = [_window("09:00", "12:00"), _window("14:00", "16:00")]
    booked = {"09:30", "14:00"}

    assert compute_available_slots(windows, 45, booked) == compute_available_slots(windows, 45, booked)


def test_no_windows_means_no_slots():
    assert compute_available_slots([], 30, set()) == []


@pytest.mark.parametrize("duration", [0, -30])
def test_non_positive_duration_rejected(duration):
    with pytest.raises(ValidationError):
        compute_available_slots([_window("09:00", "10:00")], duration, set())


def test_malformed_window_time_rejected():
    with pytest.raises(ValidationError):
        compute_available_slots([_window("9am", "10:00")], 30, set())


@pytest.mark.parametrize("value,expected", [("00:00", 0), ("09:30", 570), ("23:59", 1439), ("10:15:00", 615)])
def test_parse_hhmm(value, expected):
    assert parse_hhmm(value) == expected


@pytest.mark.parametrize("value", ["24:00", "12:60", "9:00", "", "12-30", None])
def test_parse_hhmm_rejects_bad_input(value):
    with pytest.raises(ValidationError):
        parse_hhmm(value)


def test_format_and_normalize():
    assert format_hhmm(545) == "09:05"
    assert normalize_hhmm("18:45:59") == "18:45"


def test_day_of_week_is_sunday_first():
    assert day_of_week(date(2024, 1, 7)) == 0  # Sunday
    assert day_of_week(date(2024, 1, 1)) == 1  # Monday
    assert day_of_week(date(2024, 1, 6)) == 6  # Saturday


def test_parse_booking_date():
    assert parse_booking_date("2024-01-01") == date(2024, 1, 1)
    for bad in ["2024-13-01", "01/01/2024", "2024-1-1", ""]:
        with pytest.raises(ValidationError):
            parse_booking_date(bad)


class TestAvailabilityWindow:
    def test_validate_normalizes_times(self):
        w = AvailabilityWindow(day_of_week=3, start_time="09:00:00", end_time="12:30").validate()

        assert w.to_row() == {"day_of_week": 3, "start_time": "09:00", "end_time": "12:30"}

    @pytest.mark.parametrize(
        "day,start,end",
        [
            (1, "12:00", "09:00"),  # spans midnight / reversed
            (1, "09:00", "09:00"),  # empty
            (7, "09:00", "10:00"),
            (-1, "09:00", "10:00"),
            (1, "0900", "10:00"),
        ],
    )
    def test_validate_rejects(self, day, start, end):
        with pytest.raises(ValidationError):
            AvailabilityWindow(day_of_week=day, start_time=start, end_time=end).validate()
