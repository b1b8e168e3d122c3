"""Invitation contract exposed to the participant service. Delivery logic lives outside this package."""

from typing import List, Protocol, runtime_checkable
from uuid import UUID

from app.core.result import Result


@runtime_checkable
class ParticipantService(Protocol):
    async def send_invitation(
        self,
        organizer_id: UUID,
        event_id: UUID,
        user_ids: List[UUID],
    ) -> Result:
        """Invite user_ids to event_id on behalf of organizer_id."""
        ...
