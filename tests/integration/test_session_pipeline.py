"""Integration tests: fake MediaWiki API through to persisted history."""

import asyncio
import json

import pytest

from recall_trainer.models import Phase, Signal
from recall_trainer.orchestration import create_session
from recall_trainer.orchestration.factory import create_history_service
from recall_trainer.services import SQLiteKeyValueStore

RAW_EXTRACT = (
    "Paris\n"
    "The city of Paris[1] is the capital and most populous city of France.[2]\n\n\n\n"
    "It is located on the Seine."
)
CLEAN_EXTRACT = (
    "The city of Paris is the capital and most populous city of France.\n\n"
    "It is located on the Seine."
)


class TestSessionPipeline:
    """End-to-end session cycle with real store and HTTP client over a mock transport."""

    def test_full_cycle_persists_record(
        self, test_config, recording_presenter, wiki_api, make_wiki_client
    ):
        handler = wiki_api(["Paris"], {"Paris": RAW_EXTRACT}, fail_first=1)
        client = make_wiki_client(handler)

        async def scenario():
            async with client:
                dispatcher = create_session(
                    test_config, recording_presenter, client=client, sleep=_no_sleep
                )
                clock = iter([100.0, 130.0])
                dispatcher.machine.clock = lambda: next(clock)

                assert await dispatcher.dispatch(Signal.START)
                assert await dispatcher.dispatch_key("space")
                assert await dispatcher.dispatch(Signal.FINISH_RECALL, "Paris, capital of France.")
                assert await dispatcher.dispatch(Signal.PROCEED_TO_SCORE)
                assert await dispatcher.dispatch(Signal.SELECT_GRADE, 5)
                assert await dispatcher.dispatch(Signal.RESTART)
                return dispatcher

        dispatcher = asyncio.run(scenario())

        assert dispatcher.machine.phase is Phase.SETUP
        assert recording_presenter.articles == [("Paris", CLEAN_EXTRACT)]
        assert recording_presenter.phases == [
            Phase.READING,
            Phase.RECALL,
            Phase.COMPARE,
            Phase.SCORE,
            Phase.SETUP,
        ]

        store = SQLiteKeyValueStore(test_config.history_db_path)
        data = json.loads(store.get(test_config.history_key))
        assert len(data) == 1
        assert data[0]["attempt"] == 1
        assert data[0]["chars"] == len(CLEAN_EXTRACT)
        assert data[0]["time"] == pytest.approx(30.0)
        assert data[0]["score"] == pytest.approx(5 * len(CLEAN_EXTRACT) / 30.0)

    def test_history_reloaded_on_new_session(self, test_config, null_presenter, make_record):
        history = create_history_service(test_config)
        history.append(make_record(title="Earlier"))

        reloaded = create_history_service(test_config)
        assert [r.title for r in reloaded.all()] == ["Earlier"]
        assert reloaded.export_tabular().split("\n")[1].startswith('1,"')

    def test_unreachable_api_leaves_setup_usable(
        self, test_config, recording_presenter, wiki_api, make_wiki_client
    ):
        handler = wiki_api([], {}, fail_first=100, status_code=500)
        client = make_wiki_client(handler)

        async def scenario():
            async with client:
                dispatcher = create_session(
                    test_config, recording_presenter, client=client, sleep=_no_sleep
                )
                started = await dispatcher.dispatch(Signal.START)
                return dispatcher, started

        dispatcher, started = asyncio.run(scenario())

        assert started is False
        assert dispatcher.machine.phase is Phase.SETUP
        assert len(handler.requests) == 3
        assert recording_presenter.statuses[-1] == "Failed to load article. Please try again."
        assert recording_presenter.start_enabled == [False, True]


async def _no_sleep(seconds):
    return None
