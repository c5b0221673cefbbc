from dataclasses import dataclass
from datetime import time, timedelta
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Set

from app.core.utils import END_OF_DAY, START_OF_DAY, shift_time, truncate_to_minute
from .schedule import Schedule
from .weekday import Weekday, days_to_mask, mask_to_days

# Gap applied when a picked time would leave the window empty or inverted
AUTO_CORRECTION_DELTA = timedelta(hours=1, minutes=30)

class ValidationResult(str, Enum):
    VALID = "valid"
    EMPTY_DAYS = "empty_days"
    MISSING_START_TIME = "missing_start_time"
    MISSING_END_TIME = "missing_end_time"

    @property
    def is_valid(self) -> bool:
        return self is ValidationResult.VALID

    @property
    def message(self) -> Optional[str]:
        return _MESSAGES.get(self)

    @property
    def focus(self) -> Optional[str]:
        """Name of the field the user should be sent back to."""
        return _FOCUS.get(self)

_MESSAGES = {
    ValidationResult.EMPTY_DAYS: "Select at least one day for this schedule",
    ValidationResult.MISSING_START_TIME: "Pick a start time for this schedule",
    ValidationResult.MISSING_END_TIME: "Pick an end time for this schedule",
}

_FOCUS = {
    ValidationResult.EMPTY_DAYS: "days_of_week",
    ValidationResult.MISSING_START_TIME: "start_time",
    ValidationResult.MISSING_END_TIME: "end_time",
}

@dataclass(frozen=True)
class TimeWindow:
    """Start and end time of day. Both bounds are always present."""
    start: time
    end: time

    def __post_init__(self):
        if not self.start < self.end:
            raise ValueError(f"window start {self.start} must be before end {self.end}")

class WeeklySchedule:
    """
    Draft of a recurring schedule: the active weekdays and a time-of-day window.

    The window is either unset or has both bounds. Picking one bound on an unset
    window seeds the other with the same value, then auto-correction pushes the
    other bound away by `correction_delta` whenever the window would be empty or
    inverted.
    """

    def __init__(
        self,
        days: Iterable[Weekday] = (),
        correction_delta: timedelta = AUTO_CORRECTION_DELTA,
    ):
        if correction_delta < timedelta(minutes=1):
            raise ValueError("correction_delta must be at least one minute")
        self.correction_delta = correction_delta
        self._days: Set[Weekday] = {Weekday(day) for day in days}
        self._window: Optional[TimeWindow] = None

    @classmethod
    def from_record(
        cls,
        schedule: Schedule,
        correction_delta: timedelta = AUTO_CORRECTION_DELTA,
    ) -> "WeeklySchedule":
        weekly = cls(mask_to_days(schedule.days_of_week), correction_delta)
        # Replaying through the setters repairs half-set or inverted records
        if schedule.start_time is not None:
            weekly.set_start_time(schedule.start_time)
        if schedule.end_time is not None:
            weekly.set_end_time(schedule.end_time)
        return weekly

    def to_record(self, subject_id: Optional[str] = None, **fields) -> Schedule:
        return Schedule(
            subject_id=subject_id,
            days_of_week=self.days_of_week,
            start_time=self.start_time,
            end_time=self.end_time,
            **fields,
        )

    @property
    def days_of_week(self) -> int:
        return days_to_mask(self._days)

    @property
    def window(self) -> Optional[TimeWindow]:
        return self._window

    @property
    def start_time(self) -> Optional[time]:
        return self._window.start if self._window else None

    @property
    def end_time(self) -> Optional[time]:
        return self._window.end if self._window else None

    def set_day(self, day: Weekday, active: bool) -> None:
        day = Weekday(day)
        if active:
            self._days.add(day)
        else:
            self._days.discard(day)

    def get_active_days(self) -> FrozenSet[Weekday]:
        return frozenset(self._days)

    def set_start_time(self, value: time) -> TimeWindow:
        start = truncate_to_minute(value)
        end = self.end_time if self._window else start
        if end <= start:
            end = shift_time(start, self.correction_delta)
            if end <= start:
                # Picked at the very end of the day, nothing fits after it
                start = shift_time(END_OF_DAY, -self.correction_delta)
                end = END_OF_DAY
        self._window = TimeWindow(start, end)
        return self._window

    def set_end_time(self, value: time) -> TimeWindow:
        end = truncate_to_minute(value)
        start = self.start_time if self._window else end
        if start >= end:
            start = shift_time(end, -self.correction_delta)
            if start >= end:
                start = START_OF_DAY
                end = shift_time(START_OF_DAY, self.correction_delta)
        self._window = TimeWindow(start, end)
        return self._window

    def validate(self) -> ValidationResult:
        return check_schedule(self.days_of_week, self.start_time, self.end_time)

def check_schedule(days_of_week: int, start_time: Optional[time], end_time: Optional[time]) -> ValidationResult:
    # Order decides which field the user is sent back to
    if days_of_week == 0:
        return ValidationResult.EMPTY_DAYS
    if start_time is None:
        return ValidationResult.MISSING_START_TIME
    if end_time is None:
        return ValidationResult.MISSING_END_TIME
    return ValidationResult.VALID

def validate_record(schedule: Schedule) -> ValidationResult:
    """Check a stored record, which may carry only one of its times."""
    return check_schedule(schedule.days_of_week, schedule.start_time, schedule.end_time)
