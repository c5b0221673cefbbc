from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

START_OF_DAY = time(0, 0)
END_OF_DAY = time(23, 59)
_ANCHOR_DATE = date(2000, 1, 1)

def truncate_to_minute(value: time) -> time:
    # Schedules only care about hour and minute
    return value.replace(second=0, microsecond=0, tzinfo=None)

def shift_time(value: time, delta: timedelta) -> time:
    """
    Move a time of day by `delta` without wrapping past midnight.

    The result is clamped to the range 00:00 - 23:59.
    """
    shifted = datetime.combine(_ANCHOR_DATE, truncate_to_minute(value)) + delta
    if shifted.date() > _ANCHOR_DATE:
        return END_OF_DAY
    if shifted.date() < _ANCHOR_DATE:
        return START_OF_DAY
    return truncate_to_minute(shifted.time())

def format_date(value: date, pattern: Optional[str]) -> Optional[str]:
    if pattern is None:
        return None
    return value.strftime(pattern)

def format_time(value: time, pattern: Optional[str]) -> Optional[str]:
    if pattern is None:
        return None
    return value.strftime(pattern)

def format_datetime(value: datetime, pattern: Optional[str]) -> Optional[str]:
    if pattern is None:
        return None
    return value.strftime(pattern)

def local_timezone() -> tzinfo:
    return datetime.now().astimezone().tzinfo

def time_today(value: time) -> datetime:
    """Place a time of day on today's date in the local timezone."""
    return datetime.combine(date.today(), value).replace(tzinfo=local_timezone())

def _local_date(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(local_timezone())
    return value.date()

def is_today(value: datetime) -> bool:
    return _local_date(value) == date.today()

def is_tomorrow(value: datetime) -> bool:
    return _local_date(value) == date.today() + timedelta(days=1)

def is_yesterday(value: datetime) -> bool:
    return _local_date(value) == date.today() - timedelta(days=1)

def _now_like(value: datetime) -> datetime:
    # Naive values are compared against naive local time
    if value.tzinfo is None:
        return datetime.now()
    return datetime.now(value.tzinfo)

def is_before_now(value: datetime) -> bool:
    return value < _now_like(value)

def is_after_now(value: datetime) -> bool:
    return value > _now_like(value)

def at_start_of_day(value: datetime) -> datetime:
    """Reset the time part to midnight, keeping the date and timezone."""
    return datetime.combine(value.date(), START_OF_DAY, tzinfo=value.tzinfo)
