"""Resolve a single article from a set by an opaque identifier."""

from newsapix.data import Article


def find_article(articles: list[Article], identifier: str) -> Article | None:
    """Return the first article matching ``identifier``.

    An article matches when its ``id`` or ``alternate_uri`` equals the
    identifier, or when its ``url`` contains it. Not finding anything is a
    normal outcome and returns None.
    """
    if not identifier:
        return None
    for article in articles:
        if article.id == identifier or article.alternate_uri == identifier:
            return article
        if identifier in article.url:
            return article
    return None
