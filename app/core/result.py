"""Result envelope returned by every event operation. Callers branch on the variant, never on exceptions.

Usage:
    result = await event_service.create_event(request, user_id)
    match result:
        case Success(message=message):
            ...
        case Failure(message=message, kind=kind):
            ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Machine-readable failure category. The message stays the human-readable fallback."""

    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INVALID_INPUT = "invalid_input"
    EMPTY_RESULT = "empty_result"
    PERSISTENCE_FAILURE = "persistence_failure"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome. data is None for mutating operations."""

    data: Optional[T] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome. Always carries a message, never a payload."""

    message: str
    kind: ErrorKind

    @property
    def is_success(self) -> bool:
        return False


# Value-less outcome for create/update/delete.
Result = Union[Success[None], Failure]

# Value-bearing outcome for queries.
DataResult = Union[Success[T], Failure]
