"""Business logic services for Recall Trainer."""

from .article_fetcher import ArticleFetcher
from .export_service import ExportService
from .history_service import HistoryService
from .key_value_store import SQLiteKeyValueStore
from .scoring import LEGACY_SCORE_THRESHOLD, compute_score, display_score

__all__ = [
    "ArticleFetcher",
    "ExportService",
    "HistoryService",
    "SQLiteKeyValueStore",
    "LEGACY_SCORE_THRESHOLD",
    "compute_score",
    "display_score",
]
