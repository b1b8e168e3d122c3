"""Enumerated event filter. Storage adapters translate it to their own query language."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from app.domain.models.event import Event


@dataclass(frozen=True)
class DateOverlap:
    """Matches events whose [start_date, end_date] interval intersects [start, end]."""

    start: datetime
    end: datetime

    def matches(self, event: Event) -> bool:
        return event.start_date <= self.end and event.end_date >= self.start


@dataclass(frozen=True)
class EventFilter:
    """Conjunction of optional criteria. An empty filter matches every event."""

    organizer_id: Optional[UUID] = None
    participant_user_id: Optional[UUID] = None
    date_overlap: Optional[DateOverlap] = None

    @classmethod
    def organized_by(cls, user_id: UUID) -> "EventFilter":
        return cls(organizer_id=user_id)

    @classmethod
    def participated_by(cls, user_id: UUID) -> "EventFilter":
        return cls(participant_user_id=user_id)

    @classmethod
    def overlapping(cls, start: datetime, end: datetime) -> "EventFilter":
        return cls(date_overlap=DateOverlap(start=start, end=end))

    def matches(self, event: Event) -> bool:
        """In-memory evaluation, same semantics as the SQL translation."""
        if self.organizer_id is not None and event.organizer_id != self.organizer_id:
            return False
        if self.participant_user_id is not None and not any(
            p.user_id == self.participant_user_id for p in event.participants
        ):
            return False
        if self.date_overlap is not None and not self.date_overlap.matches(event):
            return False
        return True
