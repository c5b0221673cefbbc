from fastapi import HTTPException

from app.models import Weekday
from app.services.editor_service import EditorService, editor_service

def get_editor_service() -> EditorService:
    return editor_service

def parse_weekday(day: str) -> Weekday:
    """Accept a day name ("monday") or its ISO number ("1")."""
    try:
        if day.isdigit():
            return Weekday(int(day))
        return Weekday[day.upper()]
    except (KeyError, ValueError):
        raise HTTPException(status_code=422, detail=f"Unknown day of week: {day}")
