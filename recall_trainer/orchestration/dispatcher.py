"""Signal dispatcher between a UI adapter and the session state machine."""

import inspect
import logging
from typing import Any

from recall_trainer.exceptions import InvalidTransition, ValidationError
from recall_trainer.models import Signal

from .session_machine import TRANSITIONS, SessionStateMachine

logger = logging.getLogger(__name__)

# Raw key names a UI may forward, and the signal each one raises
KEY_BINDINGS: dict[str, Signal] = {
    "space": Signal.DONE_READING,
    " ": Signal.DONE_READING,
}


class CommandDispatcher:
    """Route named signals to state machine handlers.

    Signals that are not valid in the current phase are ignored: dispatch
    returns False and the session is left exactly as it was.
    """

    def __init__(self, machine: SessionStateMachine):
        self.machine = machine
        self._handlers = {
            Signal.START: machine.start_session,
            Signal.DONE_READING: machine.finish_reading,
            Signal.FINISH_RECALL: machine.finish_recall,
            Signal.PROCEED_TO_SCORE: machine.proceed_to_score,
            Signal.SELECT_GRADE: machine.select_grade,
            Signal.RESTART: machine.restart,
        }

    async def dispatch(self, signal: Signal | str, *args: Any, **kwargs: Any) -> bool:
        """Handle a signal.

        Args:
            signal: Signal or its name (e.g. "done_reading")
            *args: Positional payload for the handler
            **kwargs: Keyword payload for the handler

        Returns:
            True if the signal was handled, False if it was ignored or a
            session start failed to fetch an article

        Raises:
            ValidationError: If the signal name is unknown or the payload is invalid
        """
        try:
            signal = Signal(signal)
        except ValueError as e:
            raise ValidationError(f"Unknown signal: {signal!r}") from e

        if (self.machine.phase, signal) not in TRANSITIONS:
            logger.debug(f"Ignored: {signal.value} in {self.machine.phase.value}")
            return False

        handler = self._handlers[signal]
        try:
            inspect.signature(handler).bind(*args, **kwargs)
        except TypeError as e:
            raise ValidationError(f"Invalid payload for {signal.value}: {e}") from e

        try:
            result = handler(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
        except InvalidTransition as e:
            logger.debug(f"Ignored: {e}")
            return False

        return result is not False

    async def dispatch_key(self, key: str) -> bool:
        """Handle a raw key press.

        Args:
            key: Key name as reported by the UI

        Returns:
            True if the key is bound and its signal was handled
        """
        signal = KEY_BINDINGS.get(key.lower() if len(key) > 1 else key)
        if signal is None:
            return False
        return await self.dispatch(signal)
