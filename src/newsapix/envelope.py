"""Extraction of the raw article list from provider response envelopes."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


def _articles_results(data: Any) -> list[Any] | None:
    if not isinstance(data, dict):
        return None
    articles = data.get("articles")
    if isinstance(articles, dict) and isinstance(articles.get("results"), list):
        return articles["results"]
    return None


def _articles_list(data: Any) -> list[Any] | None:
    if isinstance(data, dict) and isinstance(data.get("articles"), list):
        return data["articles"]
    return None


def _results_list(data: Any) -> list[Any] | None:
    if isinstance(data, dict) and isinstance(data.get("results"), list):
        return data["results"]
    return None


def _bare_list(data: Any) -> list[Any] | None:
    if isinstance(data, list):
        return data
    return None


# Tried in order, first match wins. Add new envelope shapes here.
ENVELOPE_SHAPES: list[tuple[str, Callable[[Any], list[Any] | None]]] = [
    ("articles.results", _articles_results),
    ("articles", _articles_list),
    ("results", _results_list),
    ("list", _bare_list),
]


def match_envelope(data: Any) -> tuple[str, list[Any]] | None:
    """Find the first known envelope shape matching ``data``.

    Returns:
        Tuple of (shape name, raw article list), or None if nothing matches.
    """
    for name, matcher in ENVELOPE_SHAPES:
        records = matcher(data)
        if records is not None:
            return (name, records)
    return None


def unwrap_articles(data: Any) -> list[Any]:
    """Return the raw article list from a decoded response body.

    An unrecognized body is treated as zero results and logged; it is not
    an error.
    """
    matched = match_envelope(data)
    if matched is None:
        keys = sorted(data) if isinstance(data, dict) else type(data).__name__
        logger.warning("Unexpected response structure, treating as empty: %s", keys)
        return []
    return matched[1]
