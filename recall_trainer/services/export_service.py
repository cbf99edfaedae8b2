"""Export service for the reading session history."""

import csv
import io
from decimal import Decimal
from pathlib import Path

from recall_trainer.config import RecallTrainerConfig
from recall_trainer.models import SessionRecord
from recall_trainer.services.scoring import display_score

HEADER = [
    "Attempt",
    "Date",
    "Article",
    "Characters",
    "Time (s)",
    "Grade (out of 5)",
    "Raw Score",
]


class ExportService:
    """Export session history as comma-separated text."""

    def __init__(self, config: RecallTrainerConfig):
        self.config = config

    def render_csv(self, records: list[SessionRecord]) -> str:
        """Render records as CSV text.

        Date and article title are always quoted; numeric columns never are.
        Legacy scores are recomputed the same way as on screen.

        Args:
            records: Session records in stored order

        Returns:
            CSV text with a header row, rows separated by newlines
        """
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="\n").writerow(HEADER)

        # Strings are quoted, numbers are not
        writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
        for record in records:
            writer.writerow(
                [
                    record.attempt,
                    record.timestamp,
                    record.title,
                    record.chars,
                    Decimal(f"{record.time:.2f}"),
                    record.grade,
                    # Half-up rounding, scores are never negative
                    int(display_score(record) + 0.5),
                ]
            )
        return buffer.getvalue().rstrip("\n")

    def export_csv(self, records: list[SessionRecord], output_path: Path | None = None) -> int:
        """Write records to a CSV file.

        Args:
            records: Session records in stored order
            output_path: Destination file, defaults to the configured export filename

        Returns:
            Number of rows written (excluding header); nothing is written for
            an empty history
        """
        if not records:
            return 0

        output_path = output_path or Path(self.config.export_filename)
        output_path.write_text(self.render_csv(records), encoding="utf-8")
        return len(records)
