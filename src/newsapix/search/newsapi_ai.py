"""NewsAPI.ai (Event Registry) article client."""

import logging
import os
import time
from typing import Any

import httpx

from newsapix.data import Article
from newsapix.envelope import match_envelope
from newsapix.normalize import normalize_articles
from newsapix.run_logger import RunLogger, RunRecord
from newsapix.search.fallback import rank_articles
from newsapix.search.lookup import find_article

NEWSAPI_AI_URL = "https://newsapi.ai/api/v1/article/getArticles"

DEFAULT_CONCEPT_URIS: tuple[str, ...] = (
    "http://en.wikipedia.org/wiki/Politics",
    "http://en.wikipedia.org/wiki/Technology",
    "http://en.wikipedia.org/wiki/Business",
)

logger = logging.getLogger(__name__)


class NewsFetchError(Exception):
    """A provider call failed.

    Attributes:
        status_code: HTTP status of the response, or None when no response
            was received or its body could not be decoded.
        body: Response body text, or the underlying error message.
    """

    def __init__(self, status_code: int | None, body: str) -> None:
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(f"News fetch failed: {body}")
        else:
            super().__init__(f"News fetch failed with HTTP {status_code}: {body}")


def build_latest_request(
    limit: int,
    *,
    api_key: str,
    concept_uris: tuple[str, ...] = DEFAULT_CONCEPT_URIS,
    article_body_len: int = 1000,
) -> dict[str, Any]:
    """Build the request body for the newest English articles in ``concept_uris``."""
    return {
        "query": {
            "$query": {
                "$and": [
                    {"conceptUri": {"$and": list(concept_uris)}},
                    {"lang": "eng"},
                ]
            }
        },
        "resultType": "articles",
        "articlesPage": 1,
        "articlesCount": limit,
        "articlesSortBy": "date",
        "articlesArticleBodyLen": article_body_len,
        "apiKey": api_key,
    }


def build_search_request(
    query: str,
    limit: int,
    *,
    api_key: str,
    article_body_len: int = 1000,
) -> dict[str, Any]:
    """Build the request body matching ``query`` against title or body, by relevance."""
    return {
        "query": {
            "$query": {
                "$and": [
                    {"$or": [{"title": query}, {"body": query}]},
                    {"lang": "eng"},
                ]
            }
        },
        "resultType": "articles",
        "articlesPage": 1,
        "articlesCount": limit,
        "articlesSortBy": "rel",
        "articlesArticleBodyLen": article_body_len,
        "apiKey": api_key,
    }


def _redact(body: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in body.items() if k != "apiKey"}


class NewsApiClient:
    """Fetch and search news articles using the NewsAPI.ai article endpoint.

    Every call issues a single POST (no retries) with its own request body,
    so concurrent calls on one client are independent.

    Args:
        api_key: NewsAPI.ai API key (defaults to NEWS_API_KEY env var).
        base_url: Article endpoint URL.
        timeout: Timeout in seconds for each HTTP call.
        article_body_len: Body characters requested per article.
        concept_uris: Concepts the latest-news request is restricted to.
        latest_cache_seconds: Revalidation hint sent with latest-news calls.
        max_search_results: Upper bound on remote search result count.
        fallback_pool_size: Latest articles fetched for fallback search.
        run_logger: Optional RunLogger recording each call.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = NEWSAPI_AI_URL,
        timeout: float = 30.0,
        article_body_len: int = 1000,
        concept_uris: tuple[str, ...] = DEFAULT_CONCEPT_URIS,
        latest_cache_seconds: int = 120,
        max_search_results: int = 50,
        fallback_pool_size: int = 100,
        run_logger: RunLogger | None = None,
    ) -> None:
        resolved_key = api_key or os.environ.get("NEWS_API_KEY")
        if not resolved_key:
            raise ValueError(
                "NewsAPI.ai API key required. Pass api_key or set NEWS_API_KEY env var."
            )
        self._api_key: str = resolved_key
        self._base_url = base_url
        self._timeout = timeout
        self._article_body_len = article_body_len
        self._concept_uris = concept_uris
        self._latest_cache_seconds = latest_cache_seconds
        self._max_search_results = max_search_results
        self._fallback_pool_size = fallback_pool_size
        self._run_logger = run_logger

    async def fetch_latest_news(self, limit: int = 20) -> list[Article]:
        """Fetch the latest English articles on politics, technology and business.

        Args:
            limit: Maximum number of articles to return.

        Returns:
            Normalized articles sorted by publish date, newest first.

        Raises:
            NewsFetchError: On HTTP error status, transport or decode failure.
        """
        record = self._start_run("latest", {"limit": limit})
        try:
            articles = await self._fetch_latest(limit, record)
        except NewsFetchError:
            self._finish_run(record, [])
            raise
        self._finish_run(record, articles)
        return articles

    async def search_news_by_keywords(self, query: str, limit: int = 20) -> list[Article]:
        """Search articles by free-text query.

        Falls back to ranking a latest-news snapshot locally when the remote
        search fails or finds nothing. This method never raises; if the
        fallback fetch fails too, it returns an empty list.

        Args:
            query: Free-text query matched against title and body.
            limit: Maximum number of articles to return (capped at
                ``max_search_results`` for the remote call).

        Returns:
            Matching articles, best match first.
        """
        if not query.strip():
            return []

        record = self._start_run("search", {"query": query, "limit": limit})
        body = build_search_request(
            query,
            min(limit, self._max_search_results),
            api_key=self._api_key,
            article_body_len=self._article_body_len,
        )
        try:
            articles = await self._fetch_articles(
                body, {"Cache-Control": "no-store"}, record
            )
        except Exception as e:
            logger.warning("Remote search for %r failed, using fallback search: %s", query, e)
        else:
            if articles:
                self._finish_run(record, articles)
                return articles
            logger.info("Remote search for %r returned no articles, using fallback search", query)

        articles = await self._fallback_search(query, limit, record)
        self._finish_run(record, articles, used_fallback=True)
        return articles

    async def get_article_by_id(self, identifier: str) -> Article | None:
        """Find one article in the latest-news snapshot.

        Matches ``identifier`` against each article's id and upstream uri, or
        as a substring of its url. A failed fetch is logged and treated as
        not found.

        Args:
            identifier: Article id, upstream uri, or url fragment.

        Returns:
            The first matching article, or None.
        """
        record = self._start_run("lookup", {"identifier": identifier})
        try:
            articles = await self._fetch_latest(self._fallback_pool_size, record)
        except Exception as e:
            logger.warning("Could not fetch articles to look up %r: %s", identifier, e)
            self._finish_run(record, [])
            return None

        article = find_article(articles, identifier)
        self._finish_run(record, [article] if article is not None else [])
        return article

    async def _fetch_latest(self, limit: int, record: RunRecord | None) -> list[Article]:
        body = build_latest_request(
            limit,
            api_key=self._api_key,
            concept_uris=self._concept_uris,
            article_body_len=self._article_body_len,
        )
        headers = {"Cache-Control": f"max-age={self._latest_cache_seconds}"}
        return await self._fetch_articles(body, headers, record)

    async def _fallback_search(
        self, query: str, limit: int, record: RunRecord | None
    ) -> list[Article]:
        """Rank a latest-news snapshot locally against ``query``."""
        try:
            pool = await self._fetch_latest(self._fallback_pool_size, record)
        except Exception as e:
            logger.warning("Fallback search for %r failed: %s", query, e)
            return []

        t0 = time.monotonic()
        ranked = rank_articles(pool, query, limit)
        self._log_stage(
            record,
            "fallback",
            {"query": query, "pool_size": len(pool)},
            [a.id for a in ranked],
            time.monotonic() - t0,
        )
        return ranked

    async def _fetch_articles(
        self,
        body: dict[str, Any],
        headers: dict[str, str],
        record: RunRecord | None,
    ) -> list[Article]:
        """POST ``body`` and return the normalized articles in the response."""
        data = await self._post(body, headers, record)

        t0 = time.monotonic()
        shape: str | None = None
        raw_articles: list[Any] = []
        matched = match_envelope(data)
        if matched is None:
            keys = sorted(data) if isinstance(data, dict) else type(data).__name__
            logger.warning("Unexpected response structure, treating as empty: %s", keys)
        else:
            shape, raw_articles = matched
        articles = normalize_articles(raw_articles)
        dropped = len(raw_articles) - len(articles)
        if dropped:
            logger.info("Dropped %d of %d article records", dropped, len(raw_articles))
        self._log_stage(
            record,
            "normalize",
            {"envelope": shape, "records": len(raw_articles)},
            len(articles),
            time.monotonic() - t0,
        )
        return articles

    async def _post(
        self,
        body: dict[str, Any],
        headers: dict[str, str],
        record: RunRecord | None,
    ) -> Any:
        """Issue one POST and decode the JSON response."""
        t0 = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._base_url, json=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log_stage(record, "fetch", _redact(body), None, time.monotonic() - t0, error=e)
            raise NewsFetchError(None, str(e) or type(e).__name__) from e

        if not response.is_success:
            error = NewsFetchError(response.status_code, response.text)
            logger.error("NewsAPI.ai error response (%d): %s", response.status_code, response.text)
            self._log_stage(
                record, "fetch", _redact(body), None, time.monotonic() - t0, error=error
            )
            raise error

        try:
            data = response.json()
        except ValueError as e:
            self._log_stage(record, "fetch", _redact(body), None, time.monotonic() - t0, error=e)
            raise NewsFetchError(None, f"Invalid JSON in response: {e}") from e

        self._log_stage(
            record, "fetch", _redact(body), response.status_code, time.monotonic() - t0
        )
        return data

    def _start_run(self, operation: str, params: dict[str, Any]) -> RunRecord | None:
        if self._run_logger is None:
            return None
        return self._run_logger.start_run(operation, params)

    def _log_stage(
        self,
        record: RunRecord | None,
        stage: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
        *,
        error: BaseException | None = None,
    ) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage(
                record, stage, input_data, output_data, duration_seconds, error=error
            )

    def _finish_run(
        self, record: RunRecord | None, articles: list[Article], *, used_fallback: bool = False
    ) -> None:
        if self._run_logger is not None:
            self._run_logger.finish_run(record, articles, used_fallback=used_fallback)
