"""Text and URL helpers for presenting articles."""

import logging
import math
import re
from typing import Any
from urllib.parse import urlparse

from newsapix.data import Article

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
IMAGE_EXTENSIONS = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg)$", re.IGNORECASE)
SITE_NAME = "NewsAPIx"


def generate_slug(title: str) -> str:
    """Generate a URL slug from an article title."""
    slug = re.sub(r"[^\w\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()


def truncate_text(text: str | None, max_length: int) -> str:
    """Truncate text to ``max_length`` characters, appending ``...`` when cut."""
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length] + "..."


def extract_domain(url: str) -> str:
    """Extract the domain name from a URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain name (without 'www.' prefix), or "Unknown Source" if
        extraction fails.
    """
    try:
        domain = urlparse(url).hostname
    except ValueError:
        domain = None
    if not domain:
        logger.debug(f"Could not get domain from url {url}")
        return "Unknown Source"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def is_valid_image_url(url: str) -> bool:
    """Check whether a URL is likely to point to an image."""
    if not url:
        return False
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return False
    return bool(IMAGE_EXTENSIONS.search(url)) or "image" in url


def get_reading_time(text: str) -> int:
    """Estimated reading time in whole minutes, at least 1."""
    word_count = len(text.split())
    return max(1, math.ceil(word_count / WORDS_PER_MINUTE))


def format_reading_time(minutes: int) -> str:
    if minutes == 1:
        return "1 min read"
    return f"{minutes} min read"


def format_search_query(query: str) -> str:
    """Collapse runs of whitespace in a query for display."""
    return " ".join(query.split())


def is_valid_search_query(query: str) -> bool:
    """A query is valid when it has 2 to 100 characters after trimming."""
    trimmed = query.strip()
    return 2 <= len(trimmed) <= 100


def article_metadata(article: Article) -> dict[str, Any]:
    """Page metadata (title, description, Open Graph, Twitter card) for an article."""
    description = truncate_text(article.description or article.snippet, 160)
    images = [article.image_url] if article.image_url else []
    return {
        "title": f"{article.title} - {SITE_NAME}",
        "description": description,
        "openGraph": {
            "title": article.title,
            "description": description,
            "images": [{"url": url} for url in images],
            "type": "article",
            "publishedTime": article.published_at,
            "authors": [article.source],
        },
        "twitter": {
            "card": "summary_large_image",
            "title": article.title,
            "description": description,
            "images": images,
        },
    }
