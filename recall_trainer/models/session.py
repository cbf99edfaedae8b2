"""Data models for the reading session lifecycle."""

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    """Stages of a single reading practice cycle."""

    SETUP = "setup"
    READING = "reading"
    RECALL = "recall"
    COMPARE = "compare"
    SCORE = "score"

    def __str__(self) -> str:
        return self.value


class Signal(str, Enum):
    """Named user actions the session state machine reacts to."""

    START = "start"
    DONE_READING = "done_reading"
    FINISH_RECALL = "finish_recall"
    PROCEED_TO_SCORE = "proceed_to_score"
    SELECT_GRADE = "select_grade"
    RESTART = "restart"

    def __str__(self) -> str:
        return self.value


@dataclass
class SessionContext:
    """Transient state of the session in progress.

    Owned by SessionStateMachine and discarded on the way back to SETUP.
    """

    phase: Phase = Phase.SETUP
    title: str = ""
    content: str = ""
    start_time: float = 0.0  # Monotonic clock reading at READING entry
    reading_duration: float = 0.0  # Seconds
    grade: int = 0
    recall_text: str = ""
    loading: bool = False

    @property
    def char_count(self) -> int:
        return len(self.content)

    def reset(self) -> None:
        """Clear everything except the phase."""
        self.title = ""
        self.content = ""
        self.start_time = 0.0
        self.reading_duration = 0.0
        self.grade = 0
        self.recall_text = ""
        self.loading = False
