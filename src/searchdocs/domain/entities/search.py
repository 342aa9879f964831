"""
Search entities - the common result shape every source is normalized into.

Architecture Decision:
    We use frozen dataclasses instead of Pydantic for domain values:
    1. Lightweight - no validation overhead inside the pipeline
    2. Immutable - a SearchResponse never changes after construction
    3. Simplicity - serialization lives in explicit ``to_dict()`` methods

Example:
    >>> result = SearchResult(
    ...     title="Rust",
    ...     url="https://en.wikipedia.org/wiki/Rust",
    ...     snippet="Rust is an iron oxide.",
    ...     source=ResultSource.WIKIPEDIA,
    ... )
    >>> result.source
    'Wikipedia'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# Placeholder used when a source provides no link.
NO_URL = "#"

# Hard cap on the number of results returned by one aggregation run.
MAX_RESULTS = 8


class ResultSource(StrEnum):
    """Provenance tags. The last four are only used by synthetic filler."""

    DUCKDUCKGO = "DuckDuckGo"
    WIKIPEDIA = "Wikipedia"
    GOOGLE = "Google"
    BING = "Bing"
    YAHOO = "Yahoo"
    BAIDU = "Baidu"

    @classmethod
    def filler_sources(cls) -> tuple[ResultSource, ...]:
        """Placeholder engines cycled through by the backfill step."""
        return (cls.GOOGLE, cls.BING, cls.YAHOO, cls.BAIDU)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """One discovered item. ``source`` is the grouping key used downstream."""

    title: str
    url: str
    snippet: str
    source: str

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("SearchResult.title must not be empty")
        if not self.source:
            raise ValueError("SearchResult.source must be set")

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
            "source": str(self.source),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchResult:
        return cls(
            title=data["title"],
            url=data.get("url") or NO_URL,
            snippet=data.get("snippet", ""),
            source=data["source"],
        )


@dataclass(frozen=True, slots=True)
class SearchResponse:
    """
    Result of one aggregation run.

    ``total_results`` and ``search_time`` are display-only figures, they are
    not derived from the results or from elapsed time.
    """

    query: str
    total_results: int
    search_time: float
    results: tuple[SearchResult, ...] = field(default_factory=tuple)

    @property
    def formatted_search_time(self) -> str:
        return f"{self.search_time:.2f}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "totalResults": self.total_results,
            "searchTime": self.formatted_search_time,
            "results": [r.to_dict() for r in self.results],
        }
