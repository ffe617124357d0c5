#!/usr/bin/env python
"""CLI for browsing and searching news with newsapix."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from newsapix.config import create_from_config, get_default_config_path, load_config
from newsapix.data import Article
from newsapix.helpers import (
    extract_domain,
    format_reading_time,
    format_search_query,
    get_reading_time,
    is_valid_search_query,
    truncate_text,
)
from newsapix.search import NewsFetchError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["latest", "search", "show"]
    config: Path
    query: str | None = None
    article_id: str | None = None
    limit: int = 20
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("query")
    @classmethod
    def query_must_be_valid(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not is_valid_search_query(v):
            raise ValueError("Search query must be between 2 and 100 characters")
        return format_search_query(v)

    @field_validator("limit")
    @classmethod
    def limit_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Limit must be at least 1")
        return v


def _print_articles(articles: list[Article]) -> None:
    for i, article in enumerate(articles, 1):
        logger.info(f"{i}. {article.title}")
        logger.info(f"   Source: {article.source}")
        logger.info(f"   Published: {article.published_at}")
        logger.info(f"   URL: {article.url}")
        logger.info(f"   ID: {article.id}")


def _print_article(article: Article) -> None:
    logger.info(article.title)
    logger.info(f"{article.source} ({extract_domain(article.url)})")
    logger.info(f"Published: {article.published_at}")
    logger.info(format_reading_time(get_reading_time(article.description or article.snippet)))
    if article.categories:
        logger.info(f"Categories: {', '.join(article.categories)}")
    logger.info("")
    logger.info(truncate_text(article.description or article.snippet, 1000))
    logger.info("")
    logger.info(f"Read more: {article.url}")


async def run(args: CLIArgs) -> int:
    """Execute one CLI command.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    client, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    if args.command == "latest":
        try:
            articles = await client.fetch_latest_news(args.limit)
        except NewsFetchError as e:
            logger.error(f"Error loading latest news: {e}")
            return 1
        if not articles:
            logger.info("No articles found.")
        else:
            logger.info(f"\nLatest {len(articles)} articles:\n")
            _print_articles(articles)

    elif args.command == "search":
        query = args.query or ""
        articles = await client.search_news_by_keywords(query, args.limit)
        if not articles:
            logger.info(f'No articles found for "{query}". Try broader or fewer keywords.')
        else:
            noun = "article" if len(articles) == 1 else "articles"
            logger.info(f'\nSearch results for "{query}" ({len(articles)} {noun} found):\n')
            _print_articles(articles)

    else:
        article = await client.get_article_by_id(args.article_id or "")
        if article is None:
            logger.info("Article not found.")
            return 1
        _print_article(article)

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse and search the latest news.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable per-call logging to JSON files",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    latest = subparsers.add_parser("latest", help="Show the latest articles")
    latest.add_argument("--limit", "-n", type=int, default=20)

    search = subparsers.add_parser("search", help="Search articles by keywords")
    search.add_argument("query", help="Search keywords")
    search.add_argument("--limit", "-n", type=int, default=30)

    show = subparsers.add_parser("show", help="Show one article by id, uri or url")
    show.add_argument("article_id", help="Article id, upstream uri, or url fragment")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            query=getattr(ns, "query", None),
            article_id=getattr(ns, "article_id", None),
            limit=getattr(ns, "limit", 20),
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        exit_code = asyncio.run(run(args))
    except ValueError as e:
        # Raised at client construction when no API key is configured
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
