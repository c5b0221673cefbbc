import pytest
from uuid import UUID

from app.models.weekday import BIT_VALUE_MONDAY, BIT_VALUE_WEDNESDAY

EDITOR_URL = "/api/v1/schedules/editor"

async def open_editor(client, **body):
    response = await client.post(EDITOR_URL, json=body)
    assert response.status_code == 200
    return response.json()

@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()

@pytest.mark.asyncio
async def test_full_insert_flow(client, received):
    state = await open_editor(client, subject_id="algebra")
    assert state["mode"] == "insert"
    assert state["request_code"] == 43
    session_id = state["session_id"]

    response = await client.put(f"{EDITOR_URL}/{session_id}/days/monday", json={"active": True})
    assert response.json()["days"] == ["monday"]
    response = await client.put(f"{EDITOR_URL}/{session_id}/days/3", json={"active": True})
    assert response.json()["days_of_week"] == BIT_VALUE_MONDAY | BIT_VALUE_WEDNESDAY

    response = await client.put(f"{EDITOR_URL}/{session_id}/start-time", json={"value": "09:00"})
    state = response.json()
    assert state["start_time"] == "09:00:00"
    assert state["end_time"] == "10:30:00"
    assert state["formatted_end_time"] == "10:30 AM"

    response = await client.post(f"{EDITOR_URL}/{session_id}/confirm")
    assert response.status_code == 200
    schedule = response.json()
    assert schedule["subject_id"] == "algebra"
    assert schedule["days_of_week"] == BIT_VALUE_MONDAY | BIT_VALUE_WEDNESDAY
    assert len(received) == 1

    # The session ends once confirmed
    response = await client.get(f"{EDITOR_URL}/{session_id}")
    assert response.status_code == 404

@pytest.mark.asyncio
async def test_confirm_reports_first_failure(client, received):
    state = await open_editor(client)
    response = await client.post(f"{EDITOR_URL}/{state['session_id']}/confirm")
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "empty_days"
    assert detail["focus"] == "days_of_week"
    assert received == []

    await client.put(f"{EDITOR_URL}/{state['session_id']}/days/friday", json={"active": True})
    response = await client.post(f"{EDITOR_URL}/{state['session_id']}/confirm")
    assert response.json()["detail"]["focus"] == "start_time"

@pytest.mark.asyncio
async def test_update_flow_loads_existing_schedule(client):
    existing = {
        "days_of_week": BIT_VALUE_MONDAY,
        "start_time": "13:00",
        "end_time": "15:00",
        "subject_id": "biology",
    }
    state = await open_editor(client, schedule=existing)
    assert state["mode"] == "update"
    assert state["request_code"] == 89
    assert state["subject_id"] == "biology"
    assert state["formatted_days"] == "Mon"

    response = await client.put(f"{EDITOR_URL}/{state['session_id']}/end-time", json={"value": "12:00"})
    state = response.json()
    assert state["start_time"] == "10:30:00"
    assert state["end_time"] == "12:00:00"

@pytest.mark.asyncio
async def test_dismiss_discards_draft(client, received):
    state = await open_editor(client)
    response = await client.delete(f"{EDITOR_URL}/{state['session_id']}")
    assert response.status_code == 200
    response = await client.post(f"{EDITOR_URL}/{state['session_id']}/confirm")
    assert response.status_code == 404
    assert received == []

@pytest.mark.asyncio
async def test_bad_input_is_rejected(client):
    state = await open_editor(client)
    session_id = state["session_id"]
    response = await client.put(f"{EDITOR_URL}/{session_id}/days/funday", json={"active": True})
    assert response.status_code == 422
    response = await client.put(f"{EDITOR_URL}/{session_id}/start-time", json={"value": "25:00"})
    assert response.status_code == 422
    response = await client.post(EDITOR_URL, json={"schedule": {"days_of_week": 200}})
    assert response.status_code == 422

@pytest.mark.asyncio
async def test_expired_session_returns_404(client, service):
    state = await open_editor(client)
    service.expires_at[UUID(state["session_id"])] = 0.0
    response = await client.get(f"{EDITOR_URL}/{state['session_id']}")
    assert response.status_code == 404
