"""Presenter protocol for output abstraction."""

from typing import Protocol

from recall_trainer.models import HistoryEntryView, Phase


class SessionPresenter(Protocol):
    """Interface for presenting session output to the user (CLI, GUI, etc).

    The session state machine only talks to this protocol, so the same
    lifecycle works behind any front end.
    """

    def show_phase(self, phase: Phase) -> None:
        """Display the phase the session just entered.

        Args:
            phase: The new phase
        """
        ...

    def show_status(self, message: str) -> None:
        """Display a status line (loading, failure). Empty string clears it.

        Args:
            message: The status text
        """
        ...

    def set_start_enabled(self, enabled: bool) -> None:
        """Enable or disable the control that starts a session.

        Args:
            enabled: Whether a new session may be started
        """
        ...

    def show_article(self, title: str, content: str) -> None:
        """Display the normalized article for reading.

        Args:
            title: Article title
            content: Normalized article text
        """
        ...

    def show_reading_time(self, message: str) -> None:
        """Display the elapsed reading time message.

        Args:
            message: Formatted elapsed time message
        """
        ...

    def show_comparison(self, original: str, recall: str) -> None:
        """Display the original text next to the user's recollection.

        Args:
            original: Normalized article text
            recall: Text the user wrote from memory
        """
        ...

    def show_history(self, entries: list[HistoryEntryView]) -> None:
        """Display the session history.

        Args:
            entries: History entries in chronological order
        """
        ...
