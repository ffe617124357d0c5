"""Core data models for newsapix."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Article:
    """A news article in canonical form.

    Built once per upstream record by the normalizer and never mutated.
    ``id`` is always non-empty, but ids generated for records without an
    upstream identifier are not stable across fetches.
    """

    id: str
    title: str
    url: str
    source: str
    published_at: str
    description: str = ""
    snippet: str = ""
    keywords: str = ""
    image_url: str = ""
    language: str = "eng"
    categories: tuple[str, ...] = ()
    relevance_score: float = 0.0
    alternate_uri: str | None = None


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str | list | tuple | dict):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class RawArticle:
    """One article record exactly as the upstream provider delivered it.

    Field names differ between provider endpoints, so callers read fields
    through :meth:`first` with an explicit lookup order instead of indexing
    the mapping directly.
    """

    fields: Mapping[str, Any]

    @classmethod
    def wrap(cls, obj: Any) -> "RawArticle | None":
        """Wrap a decoded JSON value, or return None if it is not an object."""
        if not isinstance(obj, Mapping):
            return None
        return cls(fields=obj)

    def first(self, *names: str) -> Any:
        """Return the first non-empty field among ``names``, or None.

        ``None``, empty strings and empty containers count as missing.
        """
        for name in names:
            value = self.fields.get(name)
            if not _is_empty(value):
                return value
        return None
