import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.api.deps import get_editor_service
from app.services.editor_service import EditorService

@pytest.fixture
def received():
    return []

@pytest.fixture
def service(received):
    return EditorService(receiver=received.append)

@pytest.fixture
async def client(service):
    app.dependency_overrides[get_editor_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
