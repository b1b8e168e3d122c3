"""Domain schemas. Request/response and validation."""

from app.domain.schemas.event import (
    CreateEventRequest,
    EventResponse,
    EventWithParticipantsResponse,
    PaginatedResponse,
    ParticipantResponse,
    UpdateEventRequest,
)

__all__ = [
    "CreateEventRequest",
    "EventResponse",
    "EventWithParticipantsResponse",
    "PaginatedResponse",
    "ParticipantResponse",
    "UpdateEventRequest",
]
