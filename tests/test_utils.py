from datetime import date, datetime, time, timedelta, timezone

from app.core.utils import (
    at_start_of_day,
    format_date,
    format_datetime,
    format_time,
    is_after_now,
    is_before_now,
    is_today,
    is_tomorrow,
    is_yesterday,
    shift_time,
    time_today,
)

def test_format_with_pattern():
    assert format_time(time(14, 5), "%H:%M") == "14:05"
    assert format_time(time(14, 5), "%I:%M %p") == "02:05 PM"
    assert format_date(date(2024, 3, 1), "%Y-%m-%d") == "2024-03-01"
    assert format_datetime(datetime(2024, 3, 1, 8, 30), "%d/%m %H:%M") == "01/03 08:30"

def test_format_without_pattern():
    assert format_time(time(9, 0), None) is None
    assert format_date(date(2024, 3, 1), None) is None
    assert format_datetime(datetime(2024, 3, 1), None) is None

def test_shift_time_stays_within_the_day():
    assert shift_time(time(9, 0), timedelta(hours=1, minutes=30)) == time(10, 30)
    assert shift_time(time(23, 0), timedelta(hours=1, minutes=30)) == time(23, 59)
    assert shift_time(time(0, 30), -timedelta(hours=1, minutes=30)) == time(0, 0)

def test_time_today():
    value = time_today(time(7, 15))
    assert value.date() == date.today()
    assert value.time() == time(7, 15)
    assert value.tzinfo is not None

def test_relative_days():
    now = datetime.now()
    assert is_today(now)
    assert is_tomorrow(now + timedelta(days=1))
    assert is_yesterday(now - timedelta(days=1))
    assert not is_today(now + timedelta(days=1))

def test_before_and_after_now():
    now = datetime.now(timezone.utc)
    assert is_before_now(now - timedelta(minutes=5))
    assert is_after_now(now + timedelta(minutes=5))
    assert not is_after_now(datetime.now() - timedelta(minutes=5))

def test_at_start_of_day_keeps_timezone():
    value = datetime(2024, 3, 1, 17, 45, tzinfo=timezone.utc)
    assert at_start_of_day(value) == datetime(2024, 3, 1, tzinfo=timezone.utc)
