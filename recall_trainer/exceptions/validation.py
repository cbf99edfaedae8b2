"""Validation-related exceptions."""

from .base import RecallTrainerException


class ValidationError(RecallTrainerException):
    """Raised when user input fails validation."""

    pass
