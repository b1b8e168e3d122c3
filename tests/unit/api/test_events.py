"""Tests for events API: status codes, envelope shape, acting user handling."""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from app.api import dependencies
from app.application.exceptions import RepositoryUnavailableError
from app.domain import messages


def _at(day: int) -> datetime:
    return datetime(2024, 7, day, tzinfo=timezone.utc)


def _body(**overrides):
    body = {
        "name": "Board game night",
        "description": "Bring snacks",
        "start_date": "2024-07-01T18:00:00+03:00",
        "end_date": "2024-07-01T23:00:00+03:00",
        "location": "Kadikoy",
        "timezone": "Europe/Istanbul",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_create_event_returns_201(async_client: AsyncClient, organizer_headers, fake_repository, organizer_id):
    r = await async_client.post("/events/", json=_body(), headers=organizer_headers)

    assert r.status_code == 201
    assert r.json() == {"success": True, "message": messages.CREATE_EVENT_SUCCESS, "data": None}
    (stored,) = fake_repository.events.values()
    assert stored.organizer_id == organizer_id


@pytest.mark.asyncio
async def test_create_event_requires_acting_user(async_client: AsyncClient, fake_repository):
    r = await async_client.post("/events/", json=_body())

    assert r.status_code == 401
    assert fake_repository.writes == 0


@pytest.mark.asyncio
async def test_create_event_rejects_malformed_user_header(async_client: AsyncClient):
    r = await async_client.post("/events/", json=_body(), headers={"X-User-ID": "not-a-uuid"})
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_create_event_inverted_range_returns_422(async_client: AsyncClient, organizer_headers, fake_repository):
    body = _body(start_date="2024-01-10T00:00:00Z", end_date="2024-01-09T00:00:00Z")

    r = await async_client.post("/events/", json=body, headers=organizer_headers)

    assert r.status_code == 422
    assert r.json()["message"] == messages.INVALID_DATE_RANGE
    assert r.json()["success"] is False
    assert fake_repository.events == {}


@pytest.mark.asyncio
async def test_create_event_unknown_user_returns_404(async_client: AsyncClient):
    r = await async_client.post("/events/", json=_body(), headers={"X-User-ID": str(uuid.uuid4())})

    assert r.status_code == 404
    assert r.json()["message"] == messages.USER_NOT_FOUND


@pytest.mark.asyncio
async def test_create_event_naive_datetime_is_schema_error(async_client: AsyncClient, organizer_headers):
    r = await async_client.post("/events/", json=_body(start_date="2024-07-01T18:00:00"), headers=organizer_headers)
    assert r.status_code == 422
    assert "detail" in r.json()


@pytest.mark.asyncio
async def test_get_event(async_client: AsyncClient, fake_repository, event_factory, organizer_id):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))

    r = await async_client.get(f"/events/{event.id}")

    assert r.status_code == 200
    data = r.json()["data"]
    assert data["id"] == str(event.id)
    assert data["organizer_id"] == str(organizer_id)


@pytest.mark.asyncio
async def test_get_event_not_found(async_client: AsyncClient):
    r = await async_client.get(f"/events/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["message"] == messages.EVENT_NOT_FOUND


@pytest.mark.asyncio
async def test_update_event(async_client: AsyncClient, organizer_headers, fake_repository, event_factory, organizer_id):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))

    r = await async_client.put(
        f"/events/{event.id}",
        json=_body(id=str(event.id), name="Renamed"),
        headers=organizer_headers,
    )

    assert r.status_code == 200
    assert r.json()["message"] == messages.UPDATE_EVENT_SUCCESS
    assert fake_repository.events[event.id].name == "Renamed"


@pytest.mark.asyncio
async def test_update_event_path_body_mismatch(async_client: AsyncClient, organizer_headers):
    r = await async_client.put(
        f"/events/{uuid.uuid4()}",
        json=_body(id=str(uuid.uuid4())),
        headers=organizer_headers,
    )
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_delete_by_other_user_is_forbidden(
    async_client: AsyncClient, fake_repository, event_factory, organizer_id, other_user_id
):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))

    r = await async_client.delete(f"/events/{event.id}", headers={"X-User-ID": str(other_user_id)})

    assert r.status_code == 403
    assert r.json()["message"] == messages.UNAUTHORIZED_ACCESS
    assert event.id in fake_repository.events


@pytest.mark.asyncio
async def test_delete_by_organizer(async_client: AsyncClient, organizer_headers, fake_repository, event_factory, organizer_id):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))

    r = await async_client.delete(f"/events/{event.id}", headers=organizer_headers)

    assert r.status_code == 200
    assert fake_repository.events == {}


@pytest.mark.asyncio
async def test_list_events_filtered_by_organizer(
    async_client: AsyncClient, fake_repository, event_factory, organizer_id, other_user_id
):
    mine = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))
    fake_repository.add(event_factory(other_user_id, _at(1), _at(2)))

    r = await async_client.get("/events/", params={"organizer_id": str(organizer_id)})

    assert r.status_code == 200
    assert [e["id"] for e in r.json()["data"]] == [str(mine.id)]


@pytest.mark.asyncio
async def test_paged_on_empty_storage_returns_404(async_client: AsyncClient):
    r = await async_client.get("/events/paged", params={"page": 1, "page_size": 10})

    assert r.status_code == 404
    assert r.json()["message"] == messages.EMPTY_EVENT_LIST


@pytest.mark.asyncio
async def test_paged_envelope(async_client: AsyncClient, fake_repository, event_factory, organizer_id):
    for day in range(1, 4):
        fake_repository.add(event_factory(organizer_id, _at(day), _at(day)))

    r = await async_client.get("/events/paged", params={"page": 1, "page_size": 2})

    data = r.json()["data"]
    assert r.status_code == 200
    assert len(data["data"]) == 2
    assert data["total_pages"] == 2
    assert data["total_count"] == 3


@pytest.mark.asyncio
async def test_paged_rejects_oversized_page(async_client: AsyncClient):
    r = await async_client.get("/events/paged", params={"page_size": 1000})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_paged_rejects_page_zero(async_client: AsyncClient):
    r = await async_client.get("/events/paged", params={"page": 0})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_range_inverted(async_client: AsyncClient):
    r = await async_client.get(
        "/events/range",
        params={"start": "2024-07-20T00:00:00Z", "end": "2024-07-10T00:00:00Z"},
    )
    assert r.status_code == 422
    assert r.json()["message"] == messages.START_AFTER_END


@pytest.mark.asyncio
async def test_range_matches(async_client: AsyncClient, fake_repository, event_factory, organizer_id):
    event = fake_repository.add(event_factory(organizer_id, _at(5), _at(15)))

    r = await async_client.get(
        "/events/range",
        params={"start": "2024-07-10T00:00:00Z", "end": "2024-07-20T00:00:00Z"},
    )

    assert r.status_code == 200
    assert r.json()["message"] == messages.EVENTS_RETRIEVED
    assert [e["id"] for e in r.json()["data"]] == [str(event.id)]


@pytest.mark.asyncio
async def test_participants_empty(async_client: AsyncClient, fake_repository, event_factory, organizer_id):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))

    r = await async_client.get(f"/events/{event.id}/participants")

    assert r.status_code == 404
    assert r.json()["message"] == messages.EMPTY_PARTICIPANT_LIST


@pytest.mark.asyncio
async def test_participants_listed(
    async_client: AsyncClient, fake_repository, event_factory, organizer_id, other_user_id
):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2), participant_ids=[other_user_id]))

    r = await async_client.get(f"/events/{event.id}/participants")

    assert r.status_code == 200
    assert [p["user_id"] for p in r.json()["data"]["participants"]] == [str(other_user_id)]


@pytest.mark.asyncio
async def test_participant_count_zero(async_client: AsyncClient, fake_repository, event_factory, organizer_id):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2)))

    r = await async_client.get(f"/events/{event.id}/participants/count")

    assert r.status_code == 200
    assert r.json()["data"] == 0


@pytest.mark.asyncio
async def test_organized_and_participated(
    async_client: AsyncClient, fake_repository, event_factory, organizer_id, other_user_id
):
    event = fake_repository.add(event_factory(organizer_id, _at(1), _at(2), participant_ids=[other_user_id]))

    organized = await async_client.get(f"/events/organized/{organizer_id}")
    participated = await async_client.get(f"/events/participated/{other_user_id}")
    unknown = await async_client.get(f"/events/organized/{uuid.uuid4()}")

    assert [e["id"] for e in organized.json()["data"]] == [str(event.id)]
    assert [e["id"] for e in participated.json()["data"]] == [str(event.id)]
    assert unknown.status_code == 404
    assert unknown.json()["message"] == messages.USER_NOT_FOUND


@pytest.mark.asyncio
async def test_user_lookup_storage_failure_returns_503(async_client: AsyncClient, app_with_overrides):
    users = AsyncMock()
    users.is_user_valid.side_effect = RepositoryUnavailableError("Storage failed during is_user_valid")
    app_with_overrides.dependency_overrides[dependencies.get_user_validity] = lambda: users

    r = await async_client.get(f"/events/organized/{uuid.uuid4()}")

    assert r.status_code == 503
    assert r.json() == {"detail": "Event storage unavailable"}
