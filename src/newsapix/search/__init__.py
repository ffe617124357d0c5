from newsapix.search.base import NewsSource
from newsapix.search.fallback import rank_articles
from newsapix.search.lookup import find_article
from newsapix.search.newsapi_ai import NewsApiClient, NewsFetchError

__all__ = [
    "NewsApiClient",
    "NewsFetchError",
    "NewsSource",
    "find_article",
    "rank_articles",
]
