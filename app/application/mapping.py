"""Conversions between domain entities and transfer shapes."""

import uuid
from typing import Iterable, List

from app.application.event_repository import PaginatedEvents
from app.domain.models.event import Event
from app.domain.schemas.event import (
    CreateEventRequest,
    EventResponse,
    EventWithParticipantsResponse,
    PaginatedResponse,
)


class EventMapper:
    """Maps requests to entities and entities to response schemas."""

    def to_event(self, request: CreateEventRequest) -> Event:
        """
        Build a new entity from a create request. organizer_id is copied as given (possibly None);
        the event service overwrites it with the acting user.
        """
        return Event(
            id=uuid.uuid4(),
            organizer_id=request.organizer_id,
            name=request.name,
            description=request.description,
            start_date=request.start_date,
            end_date=request.end_date,
            location=request.location,
            timezone=request.timezone,
        )

    def to_response(self, event: Event) -> EventResponse:
        return EventResponse.model_validate(event)

    def to_responses(self, events: Iterable[Event]) -> List[EventResponse]:
        return [self.to_response(e) for e in events]

    def to_response_with_participants(self, event: Event) -> EventWithParticipantsResponse:
        return EventWithParticipantsResponse.model_validate(event)

    def to_page(self, page: PaginatedEvents) -> PaginatedResponse[EventResponse]:
        return PaginatedResponse[EventResponse](
            data=self.to_responses(page.data),
            current_page=page.current_page,
            total_pages=page.total_pages,
            page_size=page.page_size,
            total_count=page.total_count,
        )
