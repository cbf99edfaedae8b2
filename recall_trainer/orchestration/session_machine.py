"""Reading session lifecycle state machine."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime

from recall_trainer.config import RecallTrainerConfig
from recall_trainer.exceptions import ArticleUnavailable, InvalidTransition, ValidationError
from recall_trainer.interfaces import SessionPresenter
from recall_trainer.models import Phase, SessionContext, SessionRecord, Signal
from recall_trainer.services import ArticleFetcher, HistoryService, compute_score
from recall_trainer.utils import normalize_article_text

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading article..."
FAILURE_MESSAGE = "Failed to load article. Please try again."

# (phase, signal) -> phase entered when the signal is handled
TRANSITIONS: dict[tuple[Phase, Signal], Phase] = {
    (Phase.SETUP, Signal.START): Phase.READING,
    (Phase.READING, Signal.DONE_READING): Phase.RECALL,
    (Phase.RECALL, Signal.FINISH_RECALL): Phase.COMPARE,
    (Phase.COMPARE, Signal.PROCEED_TO_SCORE): Phase.SCORE,
    (Phase.SCORE, Signal.SELECT_GRADE): Phase.SCORE,
    (Phase.SCORE, Signal.RESTART): Phase.SETUP,
}


def default_timestamp() -> str:
    """Locale formatted local date and time."""
    return datetime.now().strftime("%x, %X")


class SessionStateMachine:
    """Drive one reading practice cycle at a time.

    SETUP -> READING -> RECALL -> COMPARE -> SCORE -> SETUP. Each public
    handler raises InvalidTransition, without touching any state, when its
    signal is not defined for the current phase.
    """

    def __init__(
        self,
        config: RecallTrainerConfig,
        fetcher: ArticleFetcher,
        history: HistoryService,
        presenter: SessionPresenter,
        clock: Callable[[], float] = time.monotonic,
        timestamp_factory: Callable[[], str] = default_timestamp,
    ):
        """Initialize the state machine.

        Args:
            config: Configuration
            fetcher: Article source
            history: History log completed sessions are appended to
            presenter: Output presenter
            clock: Monotonic clock in seconds, used for reading time
            timestamp_factory: Produces the human-readable record timestamp
        """
        self.config = config
        self.fetcher = fetcher
        self.history = history
        self.presenter = presenter
        self.clock = clock
        self.timestamp_factory = timestamp_factory
        self.context = SessionContext()

    @property
    def phase(self) -> Phase:
        return self.context.phase

    @property
    def loading(self) -> bool:
        return self.context.loading

    def _check(self, signal: Signal) -> Phase:
        """Return the target phase for a signal, or raise InvalidTransition."""
        target = TRANSITIONS.get((self.context.phase, signal))
        if target is None:
            raise InvalidTransition(self.context.phase, signal)
        return target

    def _enter(self, phase: Phase) -> None:
        self.context.phase = phase
        self.presenter.show_phase(phase)
        logger.debug("Entered phase %s", phase)

    async def start_session(
        self, language_code: str | None = None, char_limit: int | None = None
    ) -> bool:
        """Fetch an article and start reading it.

        Only one fetch may run at a time; a second start while loading is
        rejected. A failed fetch leaves the phase at SETUP.

        Args:
            language_code: Wikipedia language code, defaults to the configured one
            char_limit: Maximum extract length, defaults to the configured one

        Returns:
            True if the session entered READING, False if the fetch failed

        Raises:
            InvalidTransition: If not in SETUP or a fetch is already in flight
        """
        target = self._check(Signal.START)
        if self.context.loading:
            raise InvalidTransition(self.context.phase, Signal.START, "article already loading")

        self.context.loading = True
        self.presenter.set_start_enabled(False)
        self.presenter.show_status(LOADING_MESSAGE)

        try:
            article = await self.fetcher.fetch_article(language_code, char_limit)
        except ArticleUnavailable:
            self.presenter.show_status(FAILURE_MESSAGE)
            return False
        finally:
            self.context.loading = False
            self.presenter.set_start_enabled(True)

        content = normalize_article_text(article.title, article.content)
        self.context.title = article.title
        self.context.content = content
        self.presenter.show_status("")
        self.presenter.show_article(article.title, content)

        self._enter(target)
        self.context.start_time = self.clock()
        return True

    def finish_reading(self) -> float:
        """Stop the reading timer.

        Returns:
            Reading duration in seconds
        """
        target = self._check(Signal.DONE_READING)

        self.context.reading_duration = max(0.0, self.clock() - self.context.start_time)
        self.context.recall_text = ""
        self._enter(target)
        self.presenter.show_reading_time(self.reading_time_message())
        return self.context.reading_duration

    def reading_time_message(self) -> str:
        return (
            f"You read the text in {self.context.reading_duration:.2f} seconds, "
            "write everything you remember now"
        )

    def finish_recall(self, recall_text: str) -> None:
        """Keep what the user remembered and show it next to the original.

        Args:
            recall_text: Free text written from memory
        """
        target = self._check(Signal.FINISH_RECALL)

        self.context.recall_text = recall_text or ""
        self._enter(target)
        self.presenter.show_comparison(self.context.content, self.context.recall_text)

    def proceed_to_score(self) -> None:
        """Move on to grading with no grade selected."""
        target = self._check(Signal.PROCEED_TO_SCORE)

        self.context.grade = 0
        self._enter(target)

    def select_grade(self, grade: int) -> None:
        """Select the self-assessed grade.

        Args:
            grade: Grade from 1 to 5

        Raises:
            ValidationError: If the grade is out of range
        """
        self._check(Signal.SELECT_GRADE)
        if isinstance(grade, bool) or not isinstance(grade, int) or not 1 <= grade <= 5:
            raise ValidationError(f"Grade must be an integer from 1 to 5, got {grade!r}")

        self.context.grade = grade

    def build_record(self) -> SessionRecord:
        """Build the record of the session in progress.

        The attempt number is a placeholder until the history assigns it.
        """
        chars = self.context.char_count
        duration = self.context.reading_duration
        return SessionRecord(
            attempt=len(self.history) + 1,
            title=self.context.title,
            chars=chars,
            time=duration,
            grade=self.context.grade,
            score=compute_score(self.context.grade, chars, duration),
            timestamp=self.timestamp_factory(),
        )

    def restart(self) -> SessionRecord | None:
        """Save the finished session and return to SETUP.

        Returns:
            The stored record, or None if the session was empty and not saved
        """
        target = self._check(Signal.RESTART)

        stored = self.history.append(self.build_record())
        self.presenter.show_history(self.history.entries())

        self.context.reset()
        self.presenter.show_status("")
        self.presenter.set_start_enabled(True)
        self._enter(target)
        return stored
