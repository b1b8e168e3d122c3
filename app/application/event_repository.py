"""Event repository protocol. Application layer depends on this; infrastructure implements it."""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence
from uuid import UUID

from app.domain.filters import EventFilter
from app.domain.models.event import Event

# Returned by get_participant_count when the event does not exist.
PARTICIPANT_COUNT_NOT_FOUND = -1


@dataclass(frozen=True)
class PaginatedEvents:
    """One page of events with the paging figures computed by storage."""

    data: List[Event] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    page_size: int = 0
    total_count: int = 0


class EventRepository(Protocol):
    """Protocol for persisting and querying events. Write methods return the affected row count."""

    async def create(self, event: Event) -> int:
        """Insert event. Returns number of rows created (0 on failure)."""
        ...

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Return event without participants loaded, or None if not found."""
        ...

    async def update(self, event: Event) -> int:
        """Persist editable fields of event. Returns number of rows updated."""
        ...

    async def delete(self, event_id: UUID) -> int:
        """Delete event and its participant relations. Returns number of events deleted."""
        ...

    async def get_all(self, event_filter: EventFilter) -> Sequence[Event]:
        """Return every event matching event_filter, ordered by start_date."""
        ...

    async def get_all_paginated(self, page: int, page_size: int) -> PaginatedEvents:
        """Return the requested 1-based page of events ordered by start_date."""
        ...

    async def get_with_participants(self, event_id: UUID) -> Optional[Event]:
        """Return event with participants populated, or None if not found."""
        ...

    async def get_participant_count(self, event_id: UUID) -> int:
        """Return number of participants, or PARTICIPANT_COUNT_NOT_FOUND if the event does not exist."""
        ...
