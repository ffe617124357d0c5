"""Normalization of upstream article records into canonical Articles.

NewsAPI.ai returns differently named fields depending on the endpoint and
request options. Each canonical field is resolved from an explicit, ordered
list of candidate upstream fields; the first non-empty one wins.
"""

import logging
import random
import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from newsapix.data import Article, RawArticle

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 300

DEFAULT_TITLE = "Untitled"
DEFAULT_URL = "#"
DEFAULT_LANGUAGE = "eng"
DEFAULT_SOURCE = "Unknown Source"

# Probe order per canonical field
ID_FIELDS = ("uri", "id", "uuid")
TITLE_FIELDS = ("title", "headline")
DESCRIPTION_FIELDS = ("body", "description", "summary")
URL_FIELDS = ("url", "link")
IMAGE_FIELDS = ("image", "urlToImage")
LANGUAGE_FIELDS = ("lang", "language")
PUBLISHED_FIELDS = ("dateTime", "publishedAt", "date")
RELEVANCE_FIELDS = ("relevance", "score")
SOURCE_NAME_FIELDS = ("title", "name")


def generate_article_id() -> str:
    """Generate a fallback id of the form ``<epoch-millis>-<random-fraction>``."""
    return f"{time.time_ns() // 1_000_000}-{random.random()}"


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _resolve_snippet(raw: RawArticle) -> str:
    for name in ("body", "description"):
        value = raw.first(name)
        if value is not None:
            return _text(value)[:SNIPPET_LENGTH]
    return ""


def _resolve_image(raw: RawArticle) -> str:
    image = raw.first(*IMAGE_FIELDS)
    if image is not None:
        return _text(image)
    multimedia = raw.first("multimedia")
    if isinstance(multimedia, list) and isinstance(multimedia[0], Mapping):
        return _text(multimedia[0].get("url"))
    return ""


def _resolve_source(raw: RawArticle) -> str:
    source = raw.first("source")
    if isinstance(source, Mapping):
        source_fields = RawArticle(fields=source)
        name = source_fields.first(*SOURCE_NAME_FIELDS)
        return _text(name) if name is not None else DEFAULT_SOURCE
    if isinstance(source, str):
        return source
    return DEFAULT_SOURCE


def _category_label(item: Any) -> str:
    # NewsAPI.ai categories are objects like {"uri": ..., "label": ..., "wgt": ...}
    if isinstance(item, Mapping):
        return _text(item.get("label") or item.get("uri"))
    return _text(item)


def _resolve_categories(raw: RawArticle) -> tuple[str, ...]:
    categories = raw.first("categories")
    if isinstance(categories, list):
        labels = (_category_label(item) for item in categories)
        return tuple(label for label in labels if label)
    category = raw.first("category")
    if category is not None:
        return (_category_label(category),)
    return ()


def _resolve_keywords(raw: RawArticle) -> str:
    keywords = raw.first("keywords")
    if isinstance(keywords, list):
        return ", ".join(_text(k) for k in keywords)
    if keywords is not None:
        return _text(keywords)
    tags = raw.first("tags")
    if isinstance(tags, list):
        return ", ".join(_text(t) for t in tags)
    return ""


def _resolve_relevance(raw: RawArticle) -> float:
    value = raw.first(*RELEVANCE_FIELDS)
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    return max(score, 0.0)


def _build_article(raw: RawArticle) -> Article:
    upstream_id = raw.first(*ID_FIELDS)
    uri = raw.first("uri")
    title = raw.first(*TITLE_FIELDS)
    description = raw.first(*DESCRIPTION_FIELDS)
    url = raw.first(*URL_FIELDS)
    language = raw.first(*LANGUAGE_FIELDS)
    published_at = raw.first(*PUBLISHED_FIELDS)

    return Article(
        id=_text(upstream_id) if upstream_id is not None else generate_article_id(),
        title=_text(title) if title is not None else DEFAULT_TITLE,
        description=_text(description),
        snippet=_resolve_snippet(raw),
        keywords=_resolve_keywords(raw),
        url=_text(url) if url is not None else DEFAULT_URL,
        image_url=_resolve_image(raw),
        language=_text(language) if language is not None else DEFAULT_LANGUAGE,
        published_at=(
            _text(published_at)
            if published_at is not None
            else datetime.now(tz=UTC).isoformat()
        ),
        source=_resolve_source(raw),
        categories=_resolve_categories(raw),
        relevance_score=_resolve_relevance(raw),
        alternate_uri=_text(uri) if uri is not None else None,
    )


def normalize_article(record: Any) -> Article | None:
    """Map one upstream record to an Article.

    Returns None for records that cannot be normalized. Non-object input is
    skipped silently; unexpected failures while reading an object are logged
    and also dropped, so one malformed entry never aborts a page of results.

    Args:
        record: A decoded JSON value from the provider's article list.

    Returns:
        The canonical Article, or None to drop the record.
    """
    raw = RawArticle.wrap(record)
    if raw is None:
        logger.debug("Skipping non-object article record: %r", type(record).__name__)
        return None

    try:
        return _build_article(raw)
    except Exception:
        logger.warning("Failed to normalize article record, dropping it", exc_info=True)
        return None


def normalize_articles(records: list[Any]) -> list[Article]:
    """Normalize a list of upstream records, dropping the ones that fail."""
    articles: list[Article] = []
    for record in records:
        article = normalize_article(record)
        if article is not None:
            articles.append(article)
    return articles
