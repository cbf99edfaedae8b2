"""Protocol for the keyed store that holds persisted state."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a durable string-keyed, string-valued store.

    The history log is kept as one JSON document under a single key and is
    always written back as a whole.
    """

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...
