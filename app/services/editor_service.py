import time as clock
from datetime import time, timedelta
from typing import Dict, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException

from app.core.config import settings
from app.core.logger import logger
from app.models import Schedule, Weekday
from app.schemas.schedule import EditorOpenRequest, EditorStateResponse, ValidationFailure
from app.services.schedule_editor import Receiver, ScheduleEditor

class EditorService:
    """
    Keeps the open schedule editors of this process, keyed by session id.

    A session that goes unused for `ttl` is dropped with its draft.
    """

    def __init__(self, receiver: Optional[Receiver] = None, ttl: Optional[timedelta] = None):
        self.receiver = receiver
        self.ttl = settings.editor_session_ttl if ttl is None else ttl
        self.sessions: Dict[UUID, ScheduleEditor] = {}
        self.expires_at: Dict[UUID, float] = {}

    def _touch(self, session_id: UUID):
        self.expires_at[session_id] = clock.monotonic() + self.ttl.total_seconds()

    def _forget(self, session_id: UUID):
        self.sessions.pop(session_id, None)
        self.expires_at.pop(session_id, None)

    def evict_expired(self) -> int:
        now = clock.monotonic()
        expired = [session_id for session_id, deadline in self.expires_at.items() if deadline <= now]
        for session_id in expired:
            self.sessions[session_id].dismiss()
            self._forget(session_id)
            logger.info(f"Schedule editor {session_id} expired")
        return len(expired)

    def open_editor(self, data: EditorOpenRequest) -> EditorStateResponse:
        session_id = uuid4()
        editor = ScheduleEditor(
            subject_id=data.subject_id,
            schedule=data.schedule,
            receiver=self.receiver,
        )
        self.evict_expired()
        self.sessions[session_id] = editor
        self._touch(session_id)
        logger.info(f"Schedule editor {session_id} opened | Mode: {editor.request_code.name}")
        return self.get_state(session_id)

    def get_editor(self, session_id: UUID) -> ScheduleEditor:
        self.evict_expired()
        editor = self.sessions.get(session_id)
        if not editor:
            raise HTTPException(status_code=404, detail="Schedule editor not found")
        self._touch(session_id)
        return editor

    def get_state(self, session_id: UUID) -> EditorStateResponse:
        editor = self.get_editor(session_id)
        record = editor.build_record()
        return EditorStateResponse(
            session_id=session_id,
            request_code=editor.request_code.value,
            mode=editor.request_code.name.lower(),
            subject_id=record.subject_id,
            days=[day.name.lower() for day in record.get_days()],
            days_of_week=record.days_of_week,
            start_time=record.start_time,
            end_time=record.end_time,
            formatted_days=record.format_days_of_week(),
            formatted_start_time=record.format_start_time(),
            formatted_end_time=record.format_end_time(),
        )

    def set_day(self, session_id: UUID, day: Weekday, active: bool) -> EditorStateResponse:
        self.get_editor(session_id).toggle_day(day, active)
        return self.get_state(session_id)

    def set_start_time(self, session_id: UUID, value: time) -> EditorStateResponse:
        self.get_editor(session_id).pick_start_time(value)
        return self.get_state(session_id)

    def set_end_time(self, session_id: UUID, value: time) -> EditorStateResponse:
        self.get_editor(session_id).pick_end_time(value)
        return self.get_state(session_id)

    def confirm(self, session_id: UUID) -> Schedule:
        editor = self.get_editor(session_id)
        result = editor.confirm()
        if not result.is_valid:
            failure = ValidationFailure(kind=result.value, message=result.message, focus=result.focus)
            raise HTTPException(status_code=422, detail=failure.model_dump())

        # The session ends once the schedule has been handed over
        self._forget(session_id)
        return editor.result

    def dismiss(self, session_id: UUID) -> dict:
        editor = self.get_editor(session_id)
        editor.dismiss()
        self._forget(session_id)
        logger.info(f"Schedule editor {session_id} dismissed")
        return {"message": "Schedule editor dismissed"}

def log_receiver(schedule: Schedule) -> None:
    logger.info(f"Received schedule {schedule.id} for subject {schedule.subject_id}")

editor_service = EditorService(receiver=log_receiver)
