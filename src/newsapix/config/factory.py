"""Factory functions to create components from configuration."""

from pathlib import Path

from newsapix.config.models import NewsApiClientConfig, NewsApiXConfig
from newsapix.run_logger import RunLogger
from newsapix.search.newsapi_ai import NewsApiClient


def create_client(
    config: NewsApiClientConfig,
    run_logger: RunLogger | None = None,
) -> NewsApiClient:
    """Create a news client from config.

    Raises:
        ValueError: If no API key is configured or set in the environment.
    """
    return NewsApiClient(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        article_body_len=config.article_body_len,
        concept_uris=config.concept_uris,
        latest_cache_seconds=config.latest_cache_seconds,
        max_search_results=config.max_search_results,
        fallback_pool_size=config.fallback_pool_size,
        run_logger=run_logger,
    )


def create_from_config(
    config: NewsApiXConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[NewsApiClient, RunLogger | None]:
    """Create a client and optional run logger from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (client, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    client = create_client(config.client, run_logger=run_logger)
    return (client, run_logger)
