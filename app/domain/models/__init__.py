"""Domain models. Pure business entities."""

from app.domain.models.event import Event, Participant

__all__ = [
    "Event",
    "Participant",
]
