"""Event lifecycle service: the sole writer of event state. Create, update and delete with ownership and date rules."""

import logging
from typing import Optional
from uuid import UUID

from app.application.event_repository import EventRepository
from app.application.mapping import EventMapper
from app.application.user_validity import UserValidityService
from app.core.result import ErrorKind, Failure, Result, Success
from app.domain import messages
from app.domain.schemas.event import CreateEventRequest, UpdateEventRequest
from app.domain.validators.event_validator import apply_update, is_date_range_valid, is_organizer


class EventService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI, no direct infrastructure.
    Every rule is checked before the first write; a rejected call leaves storage untouched.
    """

    def __init__(
        self,
        repository: EventRepository,
        user_validity: UserValidityService,
        logger: logging.Logger,
        mapper: Optional[EventMapper] = None,
    ) -> None:
        self._repository = repository
        self._user_validity = user_validity
        self._logger = logger
        self._mapper = mapper or EventMapper()

    async def create_event(self, request: CreateEventRequest, user_id: UUID) -> Result:
        """Create an event organized by user_id. Any organizer_id in the request is ignored."""
        if not await self._user_validity.is_user_valid(user_id):
            self._logger.warning("event_create_rejected", extra={"user_id": str(user_id), "reason": "user_not_found"})
            return Failure(messages.USER_NOT_FOUND, ErrorKind.NOT_FOUND)

        if not is_date_range_valid(request.start_date, request.end_date):
            self._logger.warning(
                "event_create_rejected",
                extra={"user_id": str(user_id), "reason": "invalid_date_range"},
            )
            return Failure(messages.INVALID_DATE_RANGE, ErrorKind.INVALID_INPUT)

        event = self._mapper.to_event(request)
        event.organizer_id = user_id

        created = await self._repository.create(event)
        if created <= 0:
            self._logger.error("event_create_failed", extra={"user_id": str(user_id), "event_id": str(event.id)})
            return Failure(messages.CREATE_EVENT_ERROR, ErrorKind.PERSISTENCE_FAILURE)

        self._logger.info("event_created", extra={"user_id": str(user_id), "event_id": str(event.id)})
        return Success(message=messages.CREATE_EVENT_SUCCESS)

    async def update_event(self, request: UpdateEventRequest, user_id: UUID) -> Result:
        """
        Replace the editable fields of an event owned by user_id.
        The merged candidate is date-checked before anything is persisted.
        """
        event = await self._repository.get_by_id(request.id)
        if event is None:
            return Failure(messages.EVENT_NOT_FOUND, ErrorKind.NOT_FOUND)

        if not is_organizer(event, user_id):
            self._logger.warning(
                "event_update_rejected",
                extra={"user_id": str(user_id), "event_id": str(event.id), "reason": "not_organizer"},
            )
            return Failure(messages.UNAUTHORIZED_ACCESS, ErrorKind.UNAUTHORIZED)

        candidate = apply_update(event, request)
        if not is_date_range_valid(candidate.start_date, candidate.end_date):
            self._logger.warning(
                "event_update_rejected",
                extra={"user_id": str(user_id), "event_id": str(event.id), "reason": "invalid_date_range"},
            )
            return Failure(messages.INVALID_DATE_RANGE, ErrorKind.INVALID_INPUT)

        updated = await self._repository.update(candidate)
        if updated <= 0:
            self._logger.error("event_update_failed", extra={"user_id": str(user_id), "event_id": str(event.id)})
            return Failure(messages.UPDATE_EVENT_ERROR, ErrorKind.PERSISTENCE_FAILURE)

        self._logger.info("event_updated", extra={"user_id": str(user_id), "event_id": str(event.id)})
        return Success(message=messages.UPDATE_EVENT_SUCCESS)

    async def delete_event(self, event_id: UUID, user_id: UUID) -> Result:
        """Delete an event. Only its organizer may do so."""
        event = await self._repository.get_by_id(event_id)
        if event is None:
            return Failure(messages.EVENT_NOT_FOUND, ErrorKind.NOT_FOUND)

        if not is_organizer(event, user_id):
            self._logger.warning(
                "event_delete_rejected",
                extra={"user_id": str(user_id), "event_id": str(event_id), "reason": "not_organizer"},
            )
            return Failure(messages.UNAUTHORIZED_ACCESS, ErrorKind.UNAUTHORIZED)

        deleted = await self._repository.delete(event_id)
        if deleted <= 0:
            self._logger.error("event_delete_failed", extra={"user_id": str(user_id), "event_id": str(event_id)})
            return Failure(messages.DELETE_EVENT_ERROR, ErrorKind.PERSISTENCE_FAILURE)

        self._logger.info("event_deleted", extra={"user_id": str(user_id), "event_id": str(event_id)})
        return Success(message=messages.DELETE_EVENT_SUCCESS)
