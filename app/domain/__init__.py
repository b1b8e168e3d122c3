"""Domain layer: models, schemas, filters, validators, messages. Pure business logic only."""

from app.domain.filters import DateOverlap, EventFilter
from app.domain.models import Event, Participant
from app.domain.schemas import (
    CreateEventRequest,
    EventResponse,
    EventWithParticipantsResponse,
    PaginatedResponse,
    ParticipantResponse,
    UpdateEventRequest,
)
from app.domain.validators import apply_update, is_date_range_valid, is_organizer

__all__ = [
    "CreateEventRequest",
    "DateOverlap",
    "Event",
    "EventFilter",
    "EventResponse",
    "EventWithParticipantsResponse",
    "PaginatedResponse",
    "Participant",
    "ParticipantResponse",
    "UpdateEventRequest",
    "apply_update",
    "is_date_range_valid",
    "is_organizer",
]
