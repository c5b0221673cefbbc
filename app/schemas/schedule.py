from pydantic import BaseModel
from datetime import time
from typing import List, Optional
from uuid import UUID

from app.models import Schedule

class EditorOpenRequest(BaseModel):
    subject_id: Optional[str] = None
    schedule: Optional[Schedule] = None

class DayUpdate(BaseModel):
    active: bool

class TimePick(BaseModel):
    value: time

class EditorStateResponse(BaseModel):
    session_id: UUID
    request_code: int
    mode: str
    subject_id: Optional[str] = None
    days: List[str]
    days_of_week: int
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    formatted_days: str
    formatted_start_time: Optional[str] = None
    formatted_end_time: Optional[str] = None

class ValidationFailure(BaseModel):
    kind: str
    message: str
    focus: str
