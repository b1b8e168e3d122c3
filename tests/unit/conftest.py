"""Shared fixtures: in-memory event repository and user validity fakes."""

import math
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Set
from unittest.mock import MagicMock

import pytest

from app.application.event_repository import PARTICIPANT_COUNT_NOT_FOUND, PaginatedEvents
from app.domain.filters import EventFilter
from app.domain.models.event import Event, Participant


class FakeEventRepository:
    """In-memory EventRepository for unit tests. Counts writes so tests can assert none happened."""

    def __init__(self):
        self.events: Dict[uuid.UUID, Event] = {}
        self.writes = 0
        self.fail_writes = False

    def add(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    async def create(self, event: Event) -> int:
        if self.fail_writes:
            return 0
        self.writes += 1
        self.events[event.id] = replace(event, participants=[])
        return 1

    async def get_by_id(self, event_id: uuid.UUID) -> Optional[Event]:
        event = self.events.get(event_id)
        return replace(event, participants=[]) if event else None

    async def update(self, event: Event) -> int:
        if self.fail_writes or event.id not in self.events:
            return 0
        self.writes += 1
        stored = self.events[event.id]
        self.events[event.id] = replace(event, organizer_id=stored.organizer_id, participants=stored.participants)
        return 1

    async def delete(self, event_id: uuid.UUID) -> int:
        if self.fail_writes or event_id not in self.events:
            return 0
        self.writes += 1
        del self.events[event_id]
        return 1

    async def get_all(self, event_filter: EventFilter) -> List[Event]:
        matched = [e for e in self.events.values() if event_filter.matches(e)]
        return sorted(matched, key=lambda e: e.start_date)

    async def get_all_paginated(self, page: int, page_size: int) -> PaginatedEvents:
        ordered = sorted(self.events.values(), key=lambda e: e.start_date)
        offset = (page - 1) * page_size
        return PaginatedEvents(
            data=ordered[offset:offset + page_size],
            current_page=page,
            total_pages=math.ceil(len(ordered) / page_size),
            page_size=page_size,
            total_count=len(ordered),
        )

    async def get_with_participants(self, event_id: uuid.UUID) -> Optional[Event]:
        return self.events.get(event_id)

    async def get_participant_count(self, event_id: uuid.UUID) -> int:
        event = self.events.get(event_id)
        if event is None:
            return PARTICIPANT_COUNT_NOT_FOUND
        return len(event.participants)


class FakeUserValidity:
    def __init__(self, valid_ids: Set[uuid.UUID]):
        self.valid_ids = set(valid_ids)
        self.calls: List[uuid.UUID] = []

    async def is_user_valid(self, user_id: uuid.UUID) -> bool:
        self.calls.append(user_id)
        return user_id in self.valid_ids


def make_event(
    organizer_id: uuid.UUID,
    start: datetime,
    end: datetime,
    name: str = "Team offsite",
    participant_ids: Optional[List[uuid.UUID]] = None,
) -> Event:
    event_id = uuid.uuid4()
    return Event(
        id=event_id,
        organizer_id=organizer_id,
        name=name,
        description="Quarterly planning",
        start_date=start,
        end_date=end,
        location="Istanbul",
        timezone="Europe/Istanbul",
        participants=[Participant(user_id=u, event_id=event_id) for u in participant_ids or []],
    )


@pytest.fixture
def organizer_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def other_user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def fake_repository() -> FakeEventRepository:
    return FakeEventRepository()


@pytest.fixture
def fake_users(organizer_id, other_user_id) -> FakeUserValidity:
    return FakeUserValidity({organizer_id, other_user_id})


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def event_factory():
    """Factory for domain events; add to a FakeEventRepository with repository.add(...)."""
    return make_event
