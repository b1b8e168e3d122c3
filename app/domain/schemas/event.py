"""Pydantic schemas for event API and serialization. Strict validation, no DB or infrastructure."""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class EventFields(BaseModel):
    """Editable event fields shared by create and update requests.

    The start/end ordering is a business rule and is checked by the event service,
    not here, so an inverted range reaches the service and comes back as a Failure.
    """

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    start_date: AwareDatetime
    end_date: AwareDatetime
    location: Optional[str] = Field(None, max_length=300)
    timezone: Optional[str] = Field(None, max_length=64, description="IANA label, e.g. Europe/Istanbul")

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()


class CreateEventRequest(EventFields):
    """Request schema for creating an event. organizer_id is accepted but always replaced by the acting user."""

    organizer_id: Optional[UUID] = None


class UpdateEventRequest(EventFields):
    """Request schema for updating an event. Replaces every editable field."""

    id: UUID


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class EventResponse(BaseModel):
    """Read model for a single event."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organizer_id: UUID
    name: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    location: Optional[str] = None
    timezone: Optional[str] = None


class ParticipantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    joined_at: Optional[datetime] = None


class EventWithParticipantsResponse(EventResponse):
    """Event read model enriched with its participant list."""

    participants: List[ParticipantResponse]


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of items plus the paging figures reported by storage."""

    data: List[T]
    current_page: int
    total_pages: int
    page_size: int
    total_count: int
