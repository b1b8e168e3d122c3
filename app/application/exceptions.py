"""Application-layer exceptions. Business rule violations are returned as Failure results, not raised."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RepositoryUnavailableError(ApplicationError):
    """Raised when the storage backend fails for reasons other than a rejected write."""
