"""Custom exceptions for Recall Trainer."""

from .base import RecallTrainerException
from .fetch import ArticleUnavailable, EmptyResultError, TransportError
from .session import InvalidTransition
from .validation import ValidationError

__all__ = [
    "RecallTrainerException",
    "TransportError",
    "EmptyResultError",
    "ArticleUnavailable",
    "InvalidTransition",
    "ValidationError",
]
