"""Session lifecycle exceptions."""

from .base import RecallTrainerException


class InvalidTransition(RecallTrainerException):
    """Raised when a signal is not defined for the current phase."""

    def __init__(self, phase, signal, reason: str = ""):
        message = f"Signal '{signal}' is not valid in phase '{phase}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.phase = phase
        self.signal = signal
