"""Factory for wiring a session and its services."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from recall_trainer.config import RecallTrainerConfig
from recall_trainer.interfaces import SessionPresenter
from recall_trainer.services import (
    ArticleFetcher,
    ExportService,
    HistoryService,
    SQLiteKeyValueStore,
)

from .dispatcher import CommandDispatcher
from .session_machine import SessionStateMachine

logger = logging.getLogger(__name__)


def create_history_service(config: RecallTrainerConfig) -> HistoryService:
    """Open the configured store and load the history log.

    Args:
        config: Configuration

    Returns:
        HistoryService with the log already loaded
    """
    store = SQLiteKeyValueStore(config.history_db_path)
    store.initialize()
    history = HistoryService(store, config.history_key, ExportService(config))
    history.load()
    return history


def create_session(
    config: RecallTrainerConfig,
    presenter: SessionPresenter,
    client: httpx.AsyncClient | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> CommandDispatcher:
    """Create a state machine with its services and a dispatcher in front of it.

    Args:
        config: Configuration
        presenter: Output presenter
        client: Optional shared HTTP client for the fetcher
        sleep: Awaitable used for the retry backoff delay

    Returns:
        CommandDispatcher driving a fresh SessionStateMachine
    """
    history = create_history_service(config)
    logger.debug("History loaded with %d records", len(history))

    machine = SessionStateMachine(
        config=config,
        fetcher=ArticleFetcher(config, client=client, sleep=sleep),
        history=history,
        presenter=presenter,
    )
    return CommandDispatcher(machine)
