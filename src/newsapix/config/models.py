"""Pydantic configuration models for newsapix components."""

from typing import Literal

from pydantic import BaseModel, Field

from newsapix.search.newsapi_ai import DEFAULT_CONCEPT_URIS, NEWSAPI_AI_URL

# ============================================================
# Client Config
# ============================================================


class NewsApiClientConfig(BaseModel):
    """Configuration for NewsApiClient.

    ``api_key`` is normally left unset so the key is read from the
    NEWS_API_KEY environment variable.
    """

    type: Literal["newsapi_ai"] = "newsapi_ai"
    api_key: str | None = None
    base_url: str = NEWSAPI_AI_URL
    timeout: float = Field(default=30.0, gt=0)
    article_body_len: int = Field(default=1000, ge=-1)
    concept_uris: tuple[str, ...] = DEFAULT_CONCEPT_URIS
    latest_cache_seconds: int = Field(default=120, ge=0)
    max_search_results: int = Field(default=50, ge=1, le=100)
    fallback_pool_size: int = Field(default=100, ge=1, le=100)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-call run logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsApiXConfig(BaseModel):
    """Root configuration for newsapix."""

    client: NewsApiClientConfig = Field(default_factory=NewsApiClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
