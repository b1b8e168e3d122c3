"""Events API router: create/update/delete (acting user required) and read-only queries."""

from datetime import datetime
from typing import Annotated, Any, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.api.dependencies import get_acting_user_id, get_event_query_service, get_event_service
from app.application.event_query_service import EventQueryService
from app.application.event_service import EventService
from app.config.settings import get_settings
from app.core.result import ErrorKind, Failure, Success
from app.domain.filters import EventFilter
from app.domain.schemas.event import CreateEventRequest, UpdateEventRequest

router = APIRouter()

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 403,
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.EMPTY_RESULT: 404,
    ErrorKind.PERSISTENCE_FAILURE: 500,
}


def _to_response(result: Any, success_status: int = 200) -> JSONResponse:
    """Render a Success/Failure as {"success", "message", "data"} with a status derived from the error kind."""
    match result:
        case Success(data=data, message=message):
            return JSONResponse(
                status_code=success_status,
                content={"success": True, "message": message, "data": jsonable_encoder(data)},
            )
        case Failure(message=message, kind=kind):
            return JSONResponse(
                status_code=_STATUS_BY_KIND[kind],
                content={"success": False, "message": message, "data": None},
            )
    raise TypeError(f"Unexpected result type: {type(result).__name__}")


# Static paths first; /{event_id} would otherwise capture them.


@router.get("/paged")
async def list_events_paged(
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[Optional[int], Query(ge=1)] = None,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    """Page through all events ordered by start date."""
    settings = get_settings()
    size = page_size or settings.default_page_size
    if size > settings.max_page_size:
        return JSONResponse(
            status_code=422,
            content={"detail": f"page_size must not exceed {settings.max_page_size}"},
        )
    return _to_response(await query_service.get_all_events_with_pagination(page, size))


@router.get("/range")
async def list_events_in_range(
    start: datetime,
    end: datetime,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    """Events overlapping [start, end]. Timestamps must carry a UTC offset."""
    if start.tzinfo is None or end.tzinfo is None:
        return JSONResponse(
            status_code=422,
            content={"detail": "start and end must include a UTC offset"},
        )
    return _to_response(await query_service.get_events_by_date_range(start, end))


@router.get("/organized/{user_id}")
async def list_organized_events(
    user_id: UUID,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    return _to_response(await query_service.get_organized_events_for_user(user_id))


@router.get("/participated/{user_id}")
async def list_participated_events(
    user_id: UUID,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    return _to_response(await query_service.get_participated_events_for_user(user_id))


@router.get("/")
async def list_events(
    organizer_id: Optional[UUID] = None,
    participant_id: Optional[UUID] = None,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    """All events, optionally narrowed by organizer and/or participant."""
    event_filter = EventFilter(organizer_id=organizer_id, participant_user_id=participant_id)
    return _to_response(await query_service.get_all_events(event_filter))


@router.post("/")
async def create_event(
    body: CreateEventRequest,
    user_id: Annotated[UUID, Depends(get_acting_user_id)],
    event_service: Annotated[EventService, Depends(get_event_service)] = ...,
):
    """Create an event organized by the acting user."""
    return _to_response(await event_service.create_event(body, user_id), success_status=201)


@router.get("/{event_id}")
async def get_event(
    event_id: UUID,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    return _to_response(await query_service.get_event_by_id(event_id))


@router.put("/{event_id}")
async def update_event(
    event_id: UUID,
    body: UpdateEventRequest,
    user_id: Annotated[UUID, Depends(get_acting_user_id)],
    event_service: Annotated[EventService, Depends(get_event_service)] = ...,
):
    """Replace the editable fields of an event. Only its organizer may do so."""
    if body.id != event_id:
        return JSONResponse(
            status_code=400,
            content={"detail": "Body id does not match path event_id"},
        )
    return _to_response(await event_service.update_event(body, user_id))


@router.delete("/{event_id}")
async def delete_event(
    event_id: UUID,
    user_id: Annotated[UUID, Depends(get_acting_user_id)],
    event_service: Annotated[EventService, Depends(get_event_service)] = ...,
):
    return _to_response(await event_service.delete_event(event_id, user_id))


@router.get("/{event_id}/participants")
async def get_event_with_participants(
    event_id: UUID,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    return _to_response(await query_service.get_event_with_participants(event_id))


@router.get("/{event_id}/participants/count")
async def get_participant_count(
    event_id: UUID,
    query_service: Annotated[EventQueryService, Depends(get_event_query_service)] = ...,
):
    return _to_response(await query_service.get_participant_count(event_id))
