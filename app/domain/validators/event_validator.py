"""Validators for event domain rules. Pure functions, no infrastructure or DB access."""

from dataclasses import replace
from datetime import datetime
from uuid import UUID

from app.domain.models.event import Event
from app.domain.schemas.event import UpdateEventRequest


def is_date_range_valid(start: datetime, end: datetime) -> bool:
    """True when start is not after end. Zero-length events are valid."""
    return start <= end


def is_organizer(event: Event, user_id: UUID) -> bool:
    """Only the stored organizer may mutate an event; there is no admin override."""
    return event.organizer_id == user_id


def apply_update(event: Event, request: UpdateEventRequest) -> Event:
    """
    Return a candidate copy of event with the editable fields taken from request.
    The loaded entity is left untouched so it is never held in an invalid state.
    id, organizer_id and participants are carried over unchanged.
    """
    return replace(
        event,
        name=request.name,
        description=request.description,
        start_date=request.start_date,
        end_date=request.end_date,
        location=request.location,
        timezone=request.timezone,
    )
