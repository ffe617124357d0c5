"""Tests for article presentation helpers."""

import pytest

from newsapix.data import Article
from newsapix.helpers import (
    article_metadata,
    extract_domain,
    format_reading_time,
    format_search_query,
    generate_slug,
    get_reading_time,
    is_valid_image_url,
    is_valid_search_query,
    truncate_text,
)


def test_generate_slug() -> None:
    assert generate_slug("Markets Rally: Stocks Up 5%!") == "markets-rally-stocks-up-5"
    assert generate_slug("a  --  b") == "a-b"


def test_truncate_text() -> None:
    assert truncate_text("short", 10) == "short"
    assert truncate_text("abcdefghij", 4) == "abcd..."
    assert truncate_text(None, 4) == ""
    assert truncate_text("", 4) == ""


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.example.com/path", "example.com"),
        ("https://news.example.com", "news.example.com"),
        ("not-a-url", "Unknown Source"),
        ("#", "Unknown Source"),
    ],
)
def test_extract_domain(url: str, expected: str) -> None:
    assert extract_domain(url) == expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://cdn.example.com/a.JPG", True),
        ("https://cdn.example.com/image?id=1", True),
        ("https://cdn.example.com/file.pdf", False),
        ("/relative/a.png", False),
        ("", False),
    ],
)
def test_is_valid_image_url(url: str, expected: bool) -> None:
    assert is_valid_image_url(url) is expected


def test_reading_time() -> None:
    assert get_reading_time("") == 1
    assert get_reading_time("word " * 200) == 1
    assert get_reading_time("word " * 201) == 2
    assert format_reading_time(1) == "1 min read"
    assert format_reading_time(4) == "4 min read"


def test_search_query_helpers() -> None:
    assert format_search_query("  climate   summit \n") == "climate summit"
    assert is_valid_search_query("ai")
    assert not is_valid_search_query(" a ")
    assert not is_valid_search_query("x" * 101)


def test_article_metadata() -> None:
    article = Article(
        id="1",
        title="Rates hold",
        url="https://example.com/rates",
        source="Example News",
        published_at="2026-02-01T10:00:00Z",
        snippet="s" * 200,
        image_url="https://cdn.example.com/rates.jpg",
    )
    meta = article_metadata(article)

    assert meta["title"] == "Rates hold - NewsAPIx"
    assert meta["description"] == "s" * 160 + "..."
    assert meta["openGraph"]["images"] == [{"url": "https://cdn.example.com/rates.jpg"}]
    assert meta["openGraph"]["authors"] == ["Example News"]
    assert meta["twitter"]["images"] == ["https://cdn.example.com/rates.jpg"]
