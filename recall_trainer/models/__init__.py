"""Data models for Recall Trainer."""

from .article import Article
from .history import HistoryEntryView, SessionRecord
from .session import Phase, SessionContext, Signal

__all__ = [
    "Article",
    "SessionRecord",
    "HistoryEntryView",
    "Phase",
    "Signal",
    "SessionContext",
]
