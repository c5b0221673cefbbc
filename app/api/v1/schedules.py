from fastapi import APIRouter, Depends
from uuid import UUID

from app.api.deps import get_editor_service, parse_weekday
from app.models import Schedule, Weekday
from app.schemas.schedule import DayUpdate, EditorOpenRequest, EditorStateResponse, TimePick
from app.services.editor_service import EditorService

router = APIRouter()

@router.post("/editor", response_model=EditorStateResponse)
async def open_editor(
    data: EditorOpenRequest,
    service: EditorService = Depends(get_editor_service)
):
    return service.open_editor(data)

@router.get("/editor/{session_id}", response_model=EditorStateResponse)
async def read_editor(
    session_id: UUID,
    service: EditorService = Depends(get_editor_service)
):
    return service.get_state(session_id)

@router.put("/editor/{session_id}/days/{day}", response_model=EditorStateResponse)
async def update_day(
    session_id: UUID,
    data: DayUpdate,
    day: Weekday = Depends(parse_weekday),
    service: EditorService = Depends(get_editor_service)
):
    return service.set_day(session_id, day, data.active)

@router.put("/editor/{session_id}/start-time", response_model=EditorStateResponse)
async def pick_start_time(
    session_id: UUID,
    data: TimePick,
    service: EditorService = Depends(get_editor_service)
):
    return service.set_start_time(session_id, data.value)

@router.put("/editor/{session_id}/end-time", response_model=EditorStateResponse)
async def pick_end_time(
    session_id: UUID,
    data: TimePick,
    service: EditorService = Depends(get_editor_service)
):
    return service.set_end_time(session_id, data.value)

@router.post("/editor/{session_id}/confirm", response_model=Schedule)
async def confirm_editor(
    session_id: UUID,
    service: EditorService = Depends(get_editor_service)
):
    return service.confirm(session_id)

@router.delete("/editor/{session_id}")
async def dismiss_editor(
    session_id: UUID,
    service: EditorService = Depends(get_editor_service)
):
    return service.dismiss(session_id)
