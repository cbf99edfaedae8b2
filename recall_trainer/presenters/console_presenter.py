"""Console presenter for CLI output."""

import textwrap

from recall_trainer.models import HistoryEntryView, Phase

_PHASE_HEADINGS = {
    Phase.SETUP: "Setup",
    Phase.READING: "Read the article",
    Phase.RECALL: "Recall",
    Phase.COMPARE: "Compare",
    Phase.SCORE: "Grade your recall",
}


class ConsolePresenter:
    """Present session output to console (CLI implementation)."""

    def __init__(self, width: int = 78):
        self.width = width

    def show_phase(self, phase: Phase) -> None:
        """Display a heading for the new phase."""
        print(f"\n=== {_PHASE_HEADINGS[phase]} ===")

    def show_status(self, message: str) -> None:
        """Display a status message."""
        if message:
            print(f"[INFO] {message}")

    def set_start_enabled(self, enabled: bool) -> None:
        """No start control on the console; input blocks while loading."""

    def show_article(self, title: str, content: str) -> None:
        """Display the article wrapped to the console width."""
        print(f"\n{title}")
        print("=" * min(len(title), self.width))
        print(self._wrap(content))

    def show_reading_time(self, message: str) -> None:
        """Display the elapsed reading time."""
        print(f"\n{message}")

    def show_comparison(self, original: str, recall: str) -> None:
        """Display the original text followed by the recollection."""
        print("\nOriginal:")
        print("-" * self.width)
        print(self._wrap(original))
        print("\nYour recall:")
        print("-" * self.width)
        print(self._wrap(recall) if recall.strip() else "(nothing written)")

    def show_history(self, entries: list[HistoryEntryView]) -> None:
        """Display one line per history entry."""
        if not entries:
            print("\nNo sessions recorded yet.")
            return

        print(f"\nHistory ({len(entries)} sessions):")
        for entry in entries:
            print(f"  {entry.summary()}  {entry.title}")

    def _wrap(self, text: str) -> str:
        paragraphs = text.split("\n")
        return "\n".join(
            textwrap.fill(p, width=self.width) if p.strip() else "" for p in paragraphs
        )
