from datetime import datetime, timedelta, timezone

import pytest

from src.hr_accrual.hr_accrual.attendance.shift import (
    ShiftSchedule,
    expected_hours,
    is_cross_midnight,
    shift_end_instant,
)


@pytest.mark.parametrize(
    "start,end,hours",
    [
        ("09:00", "18:00", 9),
        ("14:00", "01:00", 11),
        ("22:30", "06:00", 7.5),
        ("09:00", "09:00", 24),
        ("00:00", "23:59", 23 + 59 / 60),
    ],
)
def test_expected_hours(start, end, hours):
    assert expected_hours(start, end) == pytest.approx(hours)


def test_missing_minutes_count_as_zero():
    assert expected_hours("9", "17:30") == pytest.approx(8.5)


def test_cross_midnight_detection():
    assert is_cross_midnight("09:00", "18:00") is False
    assert is_cross_midnight("14:00", "01:00") is True
    assert is_cross_midnight("09:00", "09:00") is True


def test_shift_end_moves_to_next_day_for_cross_midnight():
    assert shift_end_instant(datetime(2024, 3, 10, 14, 0), "14:00", "01:00") == datetime(2024, 3, 11, 1, 0)


def test_shift_end_same_day():
    assert shift_end_instant(datetime(2024, 3, 10, 9, 7, 31, 500), "09:00", "18:00") == datetime(2024, 3, 10, 18, 0)


def test_shift_end_is_anchored_on_clock_in_date():
    # late clock-in, after midnight of the scheduled day
    clock_in = datetime(2024, 12, 31, 23, 50)
    assert shift_end_instant(clock_in, "22:00", "06:00") == datetime(2025, 1, 1, 6, 0)


def test_shift_end_keeps_timezone():
    tz = timezone(timedelta(hours=-5))
    end = shift_end_instant(datetime(2024, 3, 10, 14, 0, tzinfo=tz), "14:00", "01:00")
    assert end == datetime(2024, 3, 11, 1, 0, tzinfo=tz)
    assert end.tzinfo is tz


def test_schedule_wraps_the_functions():
    schedule = ShiftSchedule("14:00", "01:00")
    assert schedule.expected_hours == 11
    assert schedule.end_for(datetime(2024, 3, 10, 14, 20)) == datetime(2024, 3, 11, 1, 0)


def test_malformed_clock_is_not_validated_here():
    with pytest.raises(ValueError):
        expected_hours("nine", "18:00")
