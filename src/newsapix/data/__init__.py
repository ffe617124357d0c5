"""Data models for newsapix."""

from newsapix.data.models import Article, RawArticle

__all__ = [
    "Article",
    "RawArticle",
]
