"""Orchestration of the reading session lifecycle."""

from .dispatcher import KEY_BINDINGS, CommandDispatcher
from .factory import create_session
from .session_machine import TRANSITIONS, SessionStateMachine

__all__ = [
    "CommandDispatcher",
    "KEY_BINDINGS",
    "SessionStateMachine",
    "TRANSITIONS",
    "create_session",
]
