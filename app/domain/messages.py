"""User-facing messages carried by Success and Failure results."""

USER_NOT_FOUND = "User not found."
EVENT_NOT_FOUND = "Event not found."
UNAUTHORIZED_ACCESS = "Unauthorized access."
INVALID_DATE_RANGE = "Invalid date range."
START_AFTER_END = "Start date cannot be later than end date."

EMPTY_EVENT_LIST = "Event list is empty."
EMPTY_PARTICIPANT_LIST = "Participant list is empty."

CREATE_EVENT_SUCCESS = "Event created successfully."
CREATE_EVENT_ERROR = "Event could not be created."
UPDATE_EVENT_SUCCESS = "Event updated successfully."
UPDATE_EVENT_ERROR = "Event could not be updated."
DELETE_EVENT_SUCCESS = "Event deleted successfully."
DELETE_EVENT_ERROR = "Event could not be deleted."

EVENTS_RETRIEVED = "Events retrieved successfully."
PARTICIPANT_COUNT_RETRIEVED = "Participant count retrieved successfully."
