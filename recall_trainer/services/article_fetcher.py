"""Random Wikipedia article fetcher with retries."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from recall_trainer.config import RecallTrainerConfig
from recall_trainer.exceptions import ArticleUnavailable, EmptyResultError, TransportError
from recall_trainer.models import Article

logger = logging.getLogger(__name__)

BASE_PARAMS = {
    "action": "query",
    "format": "json",
}


class ArticleFetcher:
    """Fetch a random article through the MediaWiki action API.

    Every attempt draws a random title and then requests its plain-text
    extract. A failed attempt is retried from scratch with a new title after
    an exponential backoff.
    """

    def __init__(
        self,
        config: RecallTrainerConfig,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """Initialize the fetcher.

        Args:
            config: Configuration with endpoint, retry and timeout settings
            client: Optional shared HTTP client. When omitted a client is
                opened for each fetch and closed afterwards.
            sleep: Awaitable used for the backoff delay
        """
        self.config = config
        self._client = client
        self._sleep = sleep

    def backoff_delay(self, attempt_index: int) -> float:
        """Seconds to wait after the failed attempt with this 0-based index."""
        return self.config.backoff_base * (2**attempt_index)

    async def fetch_article(
        self, language_code: str | None = None, char_limit: int | None = None
    ) -> Article:
        """Fetch a random article.

        Args:
            language_code: Wikipedia language code, defaults to the configured one
            char_limit: Maximum extract length, defaults to the configured one

        Returns:
            Article with the raw (un-normalized) extract

        Raises:
            ArticleUnavailable: If every attempt failed
        """
        language_code = language_code or self.config.language_code
        char_limit = char_limit or self.config.char_limit
        api_url = self.config.api_url(language_code)

        if self._client is not None:
            return await self._fetch_with_retries(self._client, api_url, char_limit)

        async with httpx.AsyncClient(
            timeout=self.config.request_timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
        ) as client:
            return await self._fetch_with_retries(client, api_url, char_limit)

    async def _fetch_with_retries(
        self, client: httpx.AsyncClient, api_url: str, char_limit: int
    ) -> Article:
        max_attempts = max(1, self.config.max_attempts)
        last_error: Exception | None = None

        for attempt in range(max_attempts):
            try:
                title = await self._fetch_random_title(client, api_url)
                content = await self._fetch_extract(client, api_url, title, char_limit)
                return Article(title=title, content=content)
            except (TransportError, EmptyResultError) as e:
                last_error = e
                logger.warning(f"Attempt {attempt + 1}/{max_attempts} failed: {e}")
                if attempt < max_attempts - 1:
                    await self._sleep(self.backoff_delay(attempt))

        logger.error(f"Failed to load article after {max_attempts} attempts: {last_error}")
        raise ArticleUnavailable(
            "Failed to load article. Please try again.", attempts=max_attempts
        ) from last_error

    async def _fetch_random_title(self, client: httpx.AsyncClient, api_url: str) -> str:
        data = await self._get_json(
            client,
            api_url,
            {**BASE_PARAMS, "list": "random", "rnnamespace": 0, "rnlimit": 1},
        )

        random_pages = _query_section(data).get("random")
        first = random_pages[0] if isinstance(random_pages, list) and random_pages else None
        title = first.get("title") if isinstance(first, dict) else None
        if not isinstance(title, str) or not title:
            raise EmptyResultError("No title found")
        return title

    async def _fetch_extract(
        self, client: httpx.AsyncClient, api_url: str, title: str, char_limit: int
    ) -> str:
        data = await self._get_json(
            client,
            api_url,
            {
                **BASE_PARAMS,
                "prop": "extracts",
                "titles": title,
                "explaintext": 1,
                "redirects": 1,
                "exchars": char_limit,
                "exintro": 1,
            },
        )

        pages = _query_section(data).get("pages")
        # Keyed by page id, or a plain list with formatversion=2
        if isinstance(pages, dict):
            pages = list(pages.values())
        if not isinstance(pages, list) or not pages:
            raise EmptyResultError(f"No page data for {title!r}")

        page = pages[0]
        extract = page.get("extract") if isinstance(page, dict) else None
        if not isinstance(extract, str) or not extract:
            raise EmptyResultError(f"No content found for {title!r}")
        return extract

    @staticmethod
    async def _get_json(client: httpx.AsyncClient, api_url: str, params: dict) -> dict:
        try:
            response = await client.get(api_url, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
            raise TransportError(f"HTTP {response.status_code}", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Malformed response body: {e}") from e

        if not isinstance(data, dict):
            raise EmptyResultError("Response is not a JSON object")
        return data


def _query_section(data: dict) -> dict:
    query = data.get("query")
    return query if isinstance(query, dict) else {}
