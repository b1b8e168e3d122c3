"""Read-only event queries: lookups, filtered lists, paging and participant projections."""

import logging
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from app.application.event_repository import EventRepository
from app.application.mapping import EventMapper
from app.application.user_validity import UserValidityService
from app.core.result import DataResult, ErrorKind, Failure, Success
from app.domain import messages
from app.domain.filters import EventFilter
from app.domain.models.event import Event
from app.domain.schemas.event import EventResponse, EventWithParticipantsResponse, PaginatedResponse
from app.domain.validators.event_validator import is_date_range_valid


class EventQueryService:
    """Reads events through the repository and maps them to response schemas. Never writes."""

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

    def _list_result(
        self,
        events: Optional[Sequence[Event]],
        message: Optional[str] = None,
    ) -> DataResult[List[EventResponse]]:
        if not events:
            return Failure(messages.EMPTY_EVENT_LIST, ErrorKind.EMPTY_RESULT)
        return Success(data=self._mapper.to_responses(events), message=message)

    async def get_event_by_id(self, event_id: UUID) -> DataResult[EventResponse]:
        event = await self._repository.get_by_id(event_id)
        if event is None:
            return Failure(messages.EVENT_NOT_FOUND, ErrorKind.NOT_FOUND)
        return Success(data=self._mapper.to_response(event))

    async def get_all_events(self, event_filter: EventFilter) -> DataResult[List[EventResponse]]:
        events = await self._repository.get_all(event_filter)
        return self._list_result(events)

    async def get_all_events_with_pagination(
        self, page: int, page_size: int
    ) -> DataResult[PaginatedResponse[EventResponse]]:
        """Paging arithmetic is done by storage; an empty page is reported as an empty list."""
        paged = await self._repository.get_all_paginated(page, page_size)
        if not paged.data:
            return Failure(messages.EMPTY_EVENT_LIST, ErrorKind.EMPTY_RESULT)
        return Success(data=self._mapper.to_page(paged))

    async def get_event_with_participants(self, event_id: UUID) -> DataResult[EventWithParticipantsResponse]:
        event = await self._repository.get_with_participants(event_id)
        if event is None:
            return Failure(messages.EVENT_NOT_FOUND, ErrorKind.NOT_FOUND)
        if not event.participants:
            return Failure(messages.EMPTY_PARTICIPANT_LIST, ErrorKind.EMPTY_RESULT)
        return Success(data=self._mapper.to_response_with_participants(event))

    async def get_events_by_date_range(
        self, start: datetime, end: datetime
    ) -> DataResult[List[EventResponse]]:
        """Events whose interval overlaps [start, end]. An inverted range is rejected before storage is queried."""
        if not is_date_range_valid(start, end):
            return Failure(messages.START_AFTER_END, ErrorKind.INVALID_INPUT)

        events = await self._repository.get_all(EventFilter.overlapping(start, end))
        return self._list_result(events, messages.EVENTS_RETRIEVED)

    async def get_organized_events_for_user(self, user_id: UUID) -> DataResult[List[EventResponse]]:
        if not await self._user_validity.is_user_valid(user_id):
            return Failure(messages.USER_NOT_FOUND, ErrorKind.NOT_FOUND)

        events = await self._repository.get_all(EventFilter.organized_by(user_id))
        return self._list_result(events)

    async def get_participated_events_for_user(self, user_id: UUID) -> DataResult[List[EventResponse]]:
        if not await self._user_validity.is_user_valid(user_id):
            return Failure(messages.USER_NOT_FOUND, ErrorKind.NOT_FOUND)

        events = await self._repository.get_all(EventFilter.participated_by(user_id))
        return self._list_result(events)

    async def get_participant_count(self, event_id: UUID) -> DataResult[int]:
        """Zero participants is a successful count; only a negative count from storage means not found."""
        count = await self._repository.get_participant_count(event_id)
        if count < 0:
            return Failure(messages.EVENT_NOT_FOUND, ErrorKind.NOT_FOUND)
        return Success(data=count, message=messages.PARTICIPANT_COUNT_RETRIEVED)
