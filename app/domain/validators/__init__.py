"""Domain validators. Pure validation functions."""

from app.domain.validators.event_validator import (
    apply_update,
    is_date_range_valid,
    is_organizer,
)

__all__ = [
    "apply_update",
    "is_date_range_valid",
    "is_organizer",
]
