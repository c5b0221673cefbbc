from .weekday import Weekday, days_to_mask, mask_to_days
from .schedule import Schedule
from .weekly_schedule import (
    AUTO_CORRECTION_DELTA,
    TimeWindow,
    ValidationResult,
    WeeklySchedule,
    validate_record,
)

__all__ = [
    "Weekday",
    "days_to_mask",
    "mask_to_days",
    "Schedule",
    "AUTO_CORRECTION_DELTA",
    "TimeWindow",
    "ValidationResult",
    "WeeklySchedule",
    "validate_record",
]
