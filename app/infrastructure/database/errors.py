"""Translation of driver failures into application errors for the database adapters."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.exceptions import RepositoryUnavailableError


@asynccontextmanager
async def storage_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Roll back and raise RepositoryUnavailableError on any SQLAlchemy failure inside the block."""
    try:
        yield
    except SQLAlchemyError as e:
        await session.rollback()
        raise RepositoryUnavailableError(f"Storage failed during {operation}: {e}") from e
