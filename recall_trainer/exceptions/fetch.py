"""Article fetching exceptions."""

from .base import RecallTrainerException


class TransportError(RecallTrainerException):
    """Raised when an API request fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyResultError(RecallTrainerException):
    """Raised when a well-formed API response carries no title or extract."""

    pass


class ArticleUnavailable(RecallTrainerException):
    """Raised when no article could be fetched within the retry budget."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts
