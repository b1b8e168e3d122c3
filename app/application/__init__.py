# Application layer: services that orchestrate domain and infrastructure.

from app.application.event_query_service import EventQueryService
from app.application.event_repository import (
    PARTICIPANT_COUNT_NOT_FOUND,
    EventRepository,
    PaginatedEvents,
)
from app.application.event_service import EventService
from app.application.exceptions import ApplicationError, RepositoryUnavailableError
from app.application.mapping import EventMapper
from app.application.participant_service import ParticipantService
from app.application.user_validity import UserValidityService

__all__ = [
    "PARTICIPANT_COUNT_NOT_FOUND",
    "ApplicationError",
    "EventMapper",
    "EventQueryService",
    "EventRepository",
    "EventService",
    "PaginatedEvents",
    "ParticipantService",
    "RepositoryUnavailableError",
    "UserValidityService",
]
