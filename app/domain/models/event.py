"""Domain model for scheduled events and their participants. Pure business semantics, with no ORM or infrastructure."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID


@dataclass(frozen=True)
class Participant:
    """Membership of a user in an event. Owned by storage; the event services only read it."""

    user_id: UUID
    event_id: UUID
    joined_at: Optional[datetime] = None


@dataclass
class Event:
    """
    A scheduled event. organizer_id is assigned once at creation and never changed by updates.
    start_date <= end_date holds for every persisted event.
    """

    id: UUID
    organizer_id: UUID
    name: str
    start_date: datetime
    end_date: datetime
    description: Optional[str] = None
    location: Optional[str] = None
    timezone: Optional[str] = None
    participants: List[Participant] = field(default_factory=list)
