"""newsapix: NewsAPI.ai article retrieval, normalization and search."""

from newsapix.config import NewsApiXConfig, create_from_config, load_config
from newsapix.data import Article, RawArticle
from newsapix.envelope import match_envelope, unwrap_articles
from newsapix.helpers import (
    article_metadata,
    extract_domain,
    format_reading_time,
    format_search_query,
    generate_slug,
    get_reading_time,
    is_valid_image_url,
    is_valid_search_query,
    truncate_text,
)
from newsapix.normalize import normalize_article, normalize_articles
from newsapix.run_logger import RunLogger
from newsapix.search.base import NewsSource
from newsapix.search.fallback import rank_articles
from newsapix.search.lookup import find_article
from newsapix.search.newsapi_ai import NewsApiClient, NewsFetchError

__all__ = [
    # Models
    "Article",
    "RawArticle",
    # Normalization
    "match_envelope",
    "normalize_article",
    "normalize_articles",
    "unwrap_articles",
    # Search
    "NewsApiClient",
    "NewsFetchError",
    "NewsSource",
    "find_article",
    "rank_articles",
    # Helpers
    "article_metadata",
    "extract_domain",
    "format_reading_time",
    "format_search_query",
    "generate_slug",
    "get_reading_time",
    "is_valid_image_url",
    "is_valid_search_query",
    "truncate_text",
    # Logging
    "RunLogger",
    # Config
    "NewsApiXConfig",
    "create_from_config",
    "load_config",
]
