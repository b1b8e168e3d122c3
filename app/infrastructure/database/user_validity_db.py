"""DB-backed user validity check against the users table."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.errors import storage_errors
from app.infrastructure.database.models import User


class DbUserValidityService:
    """Implements UserValidityService: a user is valid when the row exists and is active."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def is_user_valid(self, user_id: UUID) -> bool:
        stmt = select(User.is_active).where(User.id == user_id)
        async with storage_errors(self._session, "is_user_valid"):
            is_active = await self._session.scalar(stmt)
        return bool(is_active)
