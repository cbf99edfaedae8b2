"""Persistent reading session history."""

import json
import logging
from dataclasses import replace

from recall_trainer.interfaces import KeyValueStore
from recall_trainer.models import HistoryEntryView, SessionRecord
from recall_trainer.services.export_service import ExportService
from recall_trainer.services.scoring import compute_score, display_score

logger = logging.getLogger(__name__)


class HistoryService:
    """Append-only log of completed reading sessions.

    The whole log lives as one JSON array under a single key of the store.
    It is read once by ``load`` and written back in full on every append.
    """

    def __init__(self, store: KeyValueStore, key: str, export_service: ExportService):
        """Initialize the history service.

        Args:
            store: Keyed store holding the serialized log
            key: Key the log is stored under
            export_service: Service used to render the tabular export
        """
        self.store = store
        self.key = key
        self.export_service = export_service
        self._records: list[SessionRecord] = []

    def load(self) -> list[SessionRecord]:
        """Load the log from the store.

        Missing state yields an empty history. Unreadable state is logged and
        also treated as empty.

        Returns:
            The loaded records
        """
        raw = self.store.get(self.key)
        self._records = []
        if not raw:
            return self.all()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Stored history is not valid JSON, starting empty: {e}")
            return self.all()

        if not isinstance(data, list):
            logger.warning("Stored history is not a list, starting empty")
            return self.all()

        self._records = [
            SessionRecord.from_dict(item, position)
            for position, item in enumerate(data)
            if isinstance(item, dict)
        ]
        logger.debug("Loaded %d history records", len(self._records))
        return self.all()

    def all(self) -> list[SessionRecord]:
        """Return the records in chronological order.

        Returns:
            Copies of the stored records
        """
        return [replace(record) for record in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def append(self, record: SessionRecord) -> SessionRecord | None:
        """Append a completed session and persist the whole log.

        The attempt number and score are (re)assigned here. Sessions that
        were neither graded nor timed are rejected.

        Args:
            record: Completed session

        Returns:
            The stored record, or None if it was rejected
        """
        if record.is_empty:
            logger.debug("Rejecting empty session for %r", record.title)
            return None

        stored = replace(
            record,
            attempt=len(self._records) + 1,
            score=compute_score(record.grade, record.chars, record.time),
        )
        updated = [*self._records, stored]
        self._persist(updated)
        self._records = updated
        logger.info(f"Recorded attempt {stored.attempt}: {stored.title}")
        return replace(stored)

    def entries(self) -> list[HistoryEntryView]:
        """Return display entries, with legacy scores recomputed.

        Returns:
            One entry per record in chronological order
        """
        return [
            HistoryEntryView(
                attempt=record.attempt,
                title=record.title,
                timestamp=record.timestamp,
                chars=record.chars,
                time=record.time,
                grade=record.grade,
                score=display_score(record),
            )
            for record in self._records
        ]

    def export_tabular(self) -> str:
        """Render the log as CSV text.

        Returns:
            CSV text with header row
        """
        return self.export_service.render_csv(self._records)

    def _persist(self, records: list[SessionRecord]) -> None:
        payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False)
        self.store.set(self.key, payload)
