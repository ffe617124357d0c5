from typing import Protocol

from newsapix.data import Article


class NewsSource(Protocol):
    """Interface for a news provider client."""

    async def fetch_latest_news(self, limit: int = 20) -> list[Article]:
        """Fetch the latest articles.

        Args:
            limit: Maximum number of articles to return.

        Returns:
            Normalized articles, newest first.

        Raises:
            NewsFetchError: If the provider call fails.
        """
        ...

    async def search_news_by_keywords(self, query: str, limit: int = 20) -> list[Article]:
        """Search articles by free-text query. Never raises.

        Args:
            query: Free-text query.
            limit: Maximum number of articles to return.

        Returns:
            Matching articles, or an empty list.
        """
        ...

    async def get_article_by_id(self, identifier: str) -> Article | None:
        """Look up one article by id, upstream uri, or url fragment."""
        ...
