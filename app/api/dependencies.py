"""FastAPI dependency injection: DB session, repository, user validity, event services, acting user."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.event_query_service import EventQueryService
from app.application.event_repository import EventRepository
from app.application.event_service import EventService
from app.application.user_validity import UserValidityService
from app.infrastructure.database.event_repository_db import DbEventRepository
from app.infrastructure.database.session import get_db
from app.infrastructure.database.user_validity_db import DbUserValidityService

EVENTS_LOGGER = "app.events"


def get_event_repository(session: Annotated[AsyncSession, Depends(get_db)]) -> EventRepository:
    return DbEventRepository(session)


def get_user_validity(session: Annotated[AsyncSession, Depends(get_db)]) -> UserValidityService:
    return DbUserValidityService(session)


def get_event_service(
    repository: Annotated[EventRepository, Depends(get_event_repository)],
    user_validity: Annotated[UserValidityService, Depends(get_user_validity)],
) -> EventService:
    """Build EventService with injected repository, user validity check and logger."""
    return EventService(
        repository=repository,
        user_validity=user_validity,
        logger=logging.getLogger(EVENTS_LOGGER),
    )


def get_event_query_service(
    repository: Annotated[EventRepository, Depends(get_event_repository)],
    user_validity: Annotated[UserValidityService, Depends(get_user_validity)],
) -> EventQueryService:
    return EventQueryService(
        repository=repository,
        user_validity=user_validity,
        logger=logging.getLogger(EVENTS_LOGGER),
    )


def get_acting_user_id(request: Request) -> UUID:
    """Acting user set by UserContextMiddleware. Required for create, update and delete."""
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise HTTPException(status_code=401, detail="X-User-ID header is required")
    return user_id


def get_correlation_id(request: Request) -> str:
    """Extract correlation_id from request.state (set by middleware)."""
    return getattr(request.state, "correlation_id", "") or ""
