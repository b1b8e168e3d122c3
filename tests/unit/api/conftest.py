"""Fixtures for API unit tests: in-memory repository and user validity, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
def app_with_overrides(fake_repository, fake_users):
    """App with storage and user validity overridden so tests never reach a database."""
    from app.api import dependencies

    app.dependency_overrides[dependencies.get_event_repository] = lambda: fake_repository
    app.dependency_overrides[dependencies.get_user_validity] = lambda: fake_users
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def organizer_headers(organizer_id):
    return {"X-User-ID": str(organizer_id)}
