"""DB-backed event repository. Persists events to PostgreSQL (events, participants tables)."""

import math
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.event_repository import PARTICIPANT_COUNT_NOT_FOUND, PaginatedEvents
from app.domain.filters import EventFilter
from app.domain.models.event import Event, Participant
from app.infrastructure.database.errors import storage_errors
from app.infrastructure.database.models import Event as EventRow
from app.infrastructure.database.models import Participant as ParticipantRow


def filter_conditions(event_filter: EventFilter) -> List[ColumnElement[bool]]:
    """Translate an EventFilter into WHERE clauses, combined with AND by the caller."""
    conditions: List[ColumnElement[bool]] = []
    if event_filter.organizer_id is not None:
        conditions.append(EventRow.organizer_id == event_filter.organizer_id)
    if event_filter.participant_user_id is not None:
        conditions.append(EventRow.participants.any(ParticipantRow.user_id == event_filter.participant_user_id))
    if event_filter.date_overlap is not None:
        conditions.append(EventRow.start_date <= event_filter.date_overlap.end)
        conditions.append(EventRow.end_date >= event_filter.date_overlap.start)
    return conditions


def _to_domain(row: EventRow, with_participants: bool = False) -> Event:
    participants: List[Participant] = []
    if with_participants:
        participants = [
            Participant(user_id=p.user_id, event_id=p.event_id, joined_at=p.created_at)
            for p in row.participants
        ]
    return Event(
        id=row.id,
        organizer_id=row.organizer_id,
        name=row.event_name,
        description=row.event_description,
        start_date=row.start_date,
        end_date=row.end_date,
        location=row.location,
        timezone=row.timezone,
        participants=participants,
    )


class DbEventRepository:
    """Implements EventRepository protocol on an AsyncSession. Write methods commit before returning."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, event: Event) -> int:
        """Insert event. A constraint violation (e.g. unknown organizer) counts as zero rows created."""
        row = EventRow(
            id=event.id,
            organizer_id=event.organizer_id,
            event_name=event.name,
            event_description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            location=event.location,
            timezone=event.timezone,
        )
        async with storage_errors(self._session, "create"):
            self._session.add(row)
            try:
                await self._session.flush()
            except IntegrityError:
                await self._session.rollback()
                return 0
            await self._session.commit()
        return 1

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        async with storage_errors(self._session, "get_by_id"):
            row = await self._session.get(EventRow, event_id)
        if row is None:
            return None
        return _to_domain(row)

    async def update(self, event: Event) -> int:
        """Write the editable fields. organizer_id is never part of the UPDATE."""
        stmt = (
            update(EventRow)
            .where(EventRow.id == event.id)
            .values(
                event_name=event.name,
                event_description=event.description,
                start_date=event.start_date,
                end_date=event.end_date,
                location=event.location,
                timezone=event.timezone,
            )
        )
        async with storage_errors(self._session, "update"):
            result = await self._session.execute(stmt)
            await self._session.commit()
        return result.rowcount

    async def delete(self, event_id: UUID) -> int:
        async with storage_errors(self._session, "delete"):
            await self._session.execute(delete(ParticipantRow).where(ParticipantRow.event_id == event_id))
            result = await self._session.execute(delete(EventRow).where(EventRow.id == event_id))
            await self._session.commit()
        return result.rowcount

    async def get_all(self, event_filter: EventFilter) -> Sequence[Event]:
        stmt = (
            select(EventRow)
            .where(*filter_conditions(event_filter))
            .order_by(EventRow.start_date)
        )
        async with storage_errors(self._session, "get_all"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [_to_domain(r) for r in rows]

    async def get_all_paginated(self, page: int, page_size: int) -> PaginatedEvents:
        """1-based page. Pages past the end come back with an empty data list and the real totals."""
        stmt = (
            select(EventRow)
            .order_by(EventRow.start_date, EventRow.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        async with storage_errors(self._session, "get_all_paginated"):
            total_count = await self._session.scalar(select(func.count()).select_from(EventRow)) or 0
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return PaginatedEvents(
            data=[_to_domain(r) for r in rows],
            current_page=page,
            total_pages=math.ceil(total_count / page_size) if page_size > 0 else 0,
            page_size=page_size,
            total_count=total_count,
        )

    async def get_with_participants(self, event_id: UUID) -> Optional[Event]:
        stmt = (
            select(EventRow)
            .options(selectinload(EventRow.participants))
            .where(EventRow.id == event_id)
        )
        async with storage_errors(self._session, "get_with_participants"):
            result = await self._session.execute(stmt)
            row = result.scalar_one_or_none()
        if row is None:
            return None
        return _to_domain(row, with_participants=True)

    async def get_participant_count(self, event_id: UUID) -> int:
        async with storage_errors(self._session, "get_participant_count"):
            exists = await self._session.scalar(select(EventRow.id).where(EventRow.id == event_id))
            if exists is None:
                return PARTICIPANT_COUNT_NOT_FOUND
            count = await self._session.scalar(
                select(func.count()).select_from(ParticipantRow).where(ParticipantRow.event_id == event_id)
            )
        return count or 0
