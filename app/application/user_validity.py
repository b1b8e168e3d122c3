"""User validity protocol. The event services only ask whether an account exists and is active."""

from typing import Protocol
from uuid import UUID


class UserValidityService(Protocol):
    async def is_user_valid(self, user_id: UUID) -> bool:
        """True when user_id denotes an existing, active account."""
        ...
