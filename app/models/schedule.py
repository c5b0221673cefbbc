from sqlmodel import SQLModel, Field
from typing import List, Optional
from datetime import time
from uuid import UUID, uuid4

from app.core.config import settings
from app.core.utils import format_time
from .weekday import ALL_DAYS_MASK, Weekday, mask_to_days, sort_days

class Schedule(SQLModel):
    """
    A recurring weekly schedule as it is handed to other components.

    `days_of_week` is a bitmask of weekday flags (see `app.models.weekday`).
    """
    id: UUID = Field(default_factory=uuid4)
    subject_id: Optional[str] = None
    days_of_week: int = Field(default=0, ge=0, le=ALL_DAYS_MASK)
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    def get_days(self) -> List[Weekday]:
        return sort_days(mask_to_days(self.days_of_week))

    def get_days_as_list(self) -> List[int]:
        return [day.value for day in self.get_days()]

    def format_days_of_week(self) -> str:
        return ", ".join(day.short_name for day in self.get_days())

    def format_start_time(self, pattern: Optional[str] = None) -> Optional[str]:
        if self.start_time is None:
            return None
        return format_time(self.start_time, pattern or settings.TIME_FORMAT)

    def format_end_time(self, pattern: Optional[str] = None) -> Optional[str]:
        if self.end_time is None:
            return None
        return format_time(self.end_time, pattern or settings.TIME_FORMAT)
