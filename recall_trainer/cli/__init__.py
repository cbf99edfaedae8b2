"""Command-line interface for Recall Trainer."""
