"""Utility functions for Recall Trainer."""

from .text_utils import collapse_blank_lines, normalize_article_text, strip_citations

__all__ = [
    "collapse_blank_lines",
    "normalize_article_text",
    "strip_citations",
]
