from datetime import time, timedelta
from enum import IntEnum
from typing import Callable, Optional

from app.core.config import settings
from app.core.logger import logger
from app.models import Schedule, TimeWindow, ValidationResult, Weekday, WeeklySchedule

Receiver = Callable[[Schedule], None]

class RequestCode(IntEnum):
    INSERT = 43
    UPDATE = 89

class EditorClosedError(Exception):
    """Raised when a confirmed or dismissed editor is edited again."""

    pass

class ScheduleEditor:
    """
    One editing session for a weekly schedule.

    Passing an existing record opens the editor in update mode. The finalized
    record only reaches `receiver` once the draft validates.
    """

    def __init__(
        self,
        subject_id: Optional[str] = None,
        schedule: Optional[Schedule] = None,
        receiver: Optional[Receiver] = None,
        correction_delta: Optional[timedelta] = None,
    ):
        delta = settings.auto_correction_delta if correction_delta is None else correction_delta
        self.receiver = receiver
        self.is_open = True
        self.result: Optional[Schedule] = None

        if schedule is not None:
            self.request_code = RequestCode.UPDATE
            self.schedule_id = schedule.id
            # The loaded record owns its subject
            self.subject_id = schedule.subject_id or subject_id
            self.draft = WeeklySchedule.from_record(schedule, delta)
        else:
            self.request_code = RequestCode.INSERT
            self.schedule_id = None
            self.subject_id = subject_id
            self.draft = WeeklySchedule(correction_delta=delta)

    def _ensure_open(self):
        if not self.is_open:
            raise EditorClosedError("Schedule editor is already closed")

    def toggle_day(self, day: Weekday, active: bool) -> None:
        self._ensure_open()
        self.draft.set_day(day, active)

    def pick_start_time(self, value: time) -> TimeWindow:
        self._ensure_open()
        return self.draft.set_start_time(value)

    def pick_end_time(self, value: time) -> TimeWindow:
        self._ensure_open()
        return self.draft.set_end_time(value)

    def build_record(self) -> Schedule:
        fields = {"id": self.schedule_id} if self.schedule_id else {}
        return self.draft.to_record(self.subject_id, **fields)

    def confirm(self) -> ValidationResult:
        self._ensure_open()
        result = self.draft.validate()
        if not result.is_valid:
            logger.info(f"Schedule not confirmed: {result.value} (focus: {result.focus})")
            return result

        self.result = self.build_record()
        if self.receiver is not None:
            self.receiver(self.result)
        self.is_open = False
        logger.info(
            f"Schedule {self.result.id} finalized | "
            f"Mode: {self.request_code.name} | "
            f"Days: {self.result.format_days_of_week()}"
        )
        return result

    def dismiss(self) -> None:
        # The draft is dropped, nothing is handed to the receiver
        self.is_open = False
