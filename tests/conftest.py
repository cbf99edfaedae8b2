"""Pytest configuration and shared fixtures."""

import httpx
import pytest

from recall_trainer.config import RecallTrainerConfig
from recall_trainer.exceptions import ArticleUnavailable
from recall_trainer.models import Article, SessionRecord
from recall_trainer.presenters import NullPresenter
from recall_trainer.services import ExportService, HistoryService, SQLiteKeyValueStore


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return RecallTrainerConfig(
        language_code="en",
        char_limit=1200,
        history_db_path=temp_dir / "history.db",
        export_filename=str(temp_dir / "speed_reading_progress.csv"),
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real SessionPresenter implementation that records all calls for assertion."""

    def __init__(self):
        self.phases = []
        self.statuses = []
        self.start_enabled = []
        self.articles = []
        self.reading_times = []
        self.comparisons = []
        self.histories = []

    def show_phase(self, phase) -> None:
        self.phases.append(phase)

    def show_status(self, message: str) -> None:
        self.statuses.append(message)

    def set_start_enabled(self, enabled: bool) -> None:
        self.start_enabled.append(enabled)

    def show_article(self, title: str, content: str) -> None:
        self.articles.append((title, content))

    def show_reading_time(self, message: str) -> None:
        self.reading_times.append(message)

    def show_comparison(self, original: str, recall: str) -> None:
        self.comparisons.append((original, recall))

    def show_history(self, entries) -> None:
        self.histories.append(list(entries))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_clock():
    return FakeClock()


class StubFetcher:
    """Article source returning queued results without touching the network."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    async def fetch_article(self, language_code=None, char_limit=None):
        self.calls.append((language_code, char_limit))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_stub_fetcher():
    """Provide the StubFetcher class for custom result queues."""
    return StubFetcher


@pytest.fixture
def stub_fetcher():
    """Provide a fetcher that always returns the same small article."""
    return StubFetcher(
        Article(title="Paris", content="Paris\nThe capital[1] of France.\n\n\nIt is large."),
        Article(title="Rome", content="Rome is the capital of Italy."),
    )


@pytest.fixture
def failing_fetcher():
    return StubFetcher(ArticleUnavailable("Failed to load article. Please try again.", attempts=3))


@pytest.fixture
def kv_store(temp_dir):
    """Provide an initialized SQLite keyed store."""
    store = SQLiteKeyValueStore(temp_dir / "store.db")
    store.initialize()
    return store


@pytest.fixture
def history_service(kv_store, test_config):
    """Provide a loaded, empty HistoryService."""
    service = HistoryService(kv_store, test_config.history_key, ExportService(test_config))
    service.load()
    return service


@pytest.fixture
def make_record():
    """Factory fixture for creating SessionRecord instances with sensible defaults."""

    def _make(
        attempt=1,
        title="Paris",
        chars=600,
        time=30.0,
        grade=5,
        score=100.0,
        timestamp="1/2/2025, 10:00:00 AM",
    ):
        return SessionRecord(
            attempt=attempt,
            title=title,
            chars=chars,
            time=time,
            grade=grade,
            score=score,
            timestamp=timestamp,
        )

    return _make


def wiki_handler(titles, extracts, fail_first=0, status_code=503):
    """Build an httpx.MockTransport handler emulating the MediaWiki API.

    Args:
        titles: Titles returned by successive random-title queries
        extracts: Mapping of title to extract
        fail_first: Number of initial requests answered with ``status_code``
        status_code: Status used for the failing requests

    Returns:
        Handler function with a ``requests`` list attribute
    """
    titles = list(titles)

    def handler(request: httpx.Request) -> httpx.Response:
        handler.requests.append(request)
        if len(handler.requests) <= fail_first:
            return httpx.Response(status_code)

        params = request.url.params
        if params.get("list") == "random":
            title = titles.pop(0)
            return httpx.Response(200, json={"query": {"random": [{"id": 1, "ns": 0, "title": title}]}})

        if params.get("prop") == "extracts":
            title = params.get("titles")
            extract = extracts.get(title)
            page = {"pageid": 42, "ns": 0, "title": title}
            if extract is not None:
                page["extract"] = extract
            return httpx.Response(200, json={"query": {"pages": {"42": page}}})

        return httpx.Response(400)

    handler.requests = []
    return handler


@pytest.fixture
def wiki_api():
    """Provide the fake MediaWiki handler builder."""
    return wiki_handler


@pytest.fixture
def make_wiki_client():
    """Factory fixture for AsyncClients backed by a fake MediaWiki API."""

    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


class RecordingSleep:
    """Awaitable sleep replacement that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()
