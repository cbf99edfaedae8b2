"""Interface protocols for Recall Trainer."""

from .key_value_store import KeyValueStore
from .presenter import SessionPresenter

__all__ = ["KeyValueStore", "SessionPresenter"]
