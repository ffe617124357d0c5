"""Tests for identifier lookup."""

from newsapix.data import Article
from newsapix.search.lookup import find_article


def _article(article_id: str, url: str, alternate_uri: str | None = None) -> Article:
    return Article(
        id=article_id,
        title=f"Article {article_id}",
        url=url,
        source="Example",
        published_at="2026-02-01T10:00:00Z",
        alternate_uri=alternate_uri,
    )


ARTICLES = [
    _article("1700000000000-0.42", "https://example.com/world/peace-talks-resume", None),
    _article("8012345678", "https://example.com/business/rates", "8012345678"),
    _article("uuid-3", "https://news.example.org/tech/chips", "evr-uri-3"),
]


def test_find_by_id() -> None:
    assert find_article(ARTICLES, "uuid-3") is ARTICLES[2]


def test_find_by_alternate_uri() -> None:
    assert find_article(ARTICLES, "evr-uri-3") is ARTICLES[2]


def test_find_by_url_substring() -> None:
    found = find_article(ARTICLES, "peace-talks-resume")
    assert found is ARTICLES[0]
    assert found.id != "peace-talks-resume"


def test_find_by_full_url() -> None:
    assert find_article(ARTICLES, "https://example.com/business/rates") is ARTICLES[1]


def test_first_match_wins() -> None:
    # "example" appears in every url
    assert find_article(ARTICLES, "example") is ARTICLES[0]


def test_not_found() -> None:
    assert find_article(ARTICLES, "does-not-exist") is None


def test_empty_identifier_matches_nothing() -> None:
    assert find_article(ARTICLES, "") is None


def test_empty_article_list() -> None:
    assert find_article([], "anything") is None
