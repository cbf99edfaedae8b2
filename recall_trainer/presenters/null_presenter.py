"""Null presenter for testing (no output)."""

from recall_trainer.models import HistoryEntryView, Phase


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_phase(self, phase: Phase) -> None:
        pass

    def show_status(self, message: str) -> None:
        pass

    def set_start_enabled(self, enabled: bool) -> None:
        pass

    def show_article(self, title: str, content: str) -> None:
        pass

    def show_reading_time(self, message: str) -> None:
        pass

    def show_comparison(self, original: str, recall: str) -> None:
        pass

    def show_history(self, entries: list[HistoryEntryView]) -> None:
        pass
