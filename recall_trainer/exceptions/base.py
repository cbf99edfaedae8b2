"""Base exception classes for Recall Trainer."""


class RecallTrainerException(Exception):
    """Base exception for all Recall Trainer errors.

    All custom exceptions in the recall_trainer package should inherit
    from this base class for consistent error handling.
    """

    pass
