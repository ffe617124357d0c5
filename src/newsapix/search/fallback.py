"""Local keyword ranking over an already fetched set of articles.

Used when remote keyword search fails or comes back empty. This is a
best-effort ranking: articles that match more query tokens, or match them
in the title, sort earlier.

    score(a) = Σ_t count(t, text(a)) + TITLE_BONUS · [t in title(a)]
"""

import logging

from newsapix.data import Article

logger = logging.getLogger(__name__)

TITLE_BONUS = 2
MIN_TOKEN_LENGTH = 2


def tokenize(query: str) -> list[str]:
    """Split a query on whitespace, dropping single-character tokens."""
    return [token.lower() for token in query.split() if len(token) >= MIN_TOKEN_LENGTH]


def searchable_text(article: Article) -> str:
    """Lower-cased text that fallback search matches tokens against."""
    parts = [
        article.title,
        article.description,
        article.snippet,
        article.keywords,
        article.source,
    ]
    return " ".join(parts).lower()


def score_article(article: Article, tokens: list[str]) -> int:
    text = searchable_text(article)
    title = article.title.lower()
    score = 0
    for token in tokens:
        score += text.count(token)
        if token in title:
            score += TITLE_BONUS
    return score


def rank_articles(articles: list[Article], query: str, limit: int) -> list[Article]:
    """Filter and rank articles by how well they match ``query``.

    Articles containing none of the query tokens are dropped. The rest are
    sorted by descending score; ties keep their original order.

    Args:
        articles: Candidate articles, typically a latest-news snapshot.
        query: Free-text query.
        limit: Maximum number of articles to return.

    Returns:
        Matching articles, best match first.
    """
    tokens = tokenize(query)
    if not tokens:
        return []

    scored: list[tuple[int, Article]] = []
    for article in articles:
        text = searchable_text(article)
        if any(token in text for token in tokens):
            scored.append((score_article(article, tokens), article))

    # sorted() is stable, also with reverse=True
    scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
    logger.debug("Fallback search matched %d of %d articles", len(scored), len(articles))
    return [article for _, article in scored[: max(limit, 0)]]
