"""
Source payloads - typed views over the raw JSON each source returns.

Each payload type owns an adapter (``to_results``) that turns it into zero or
more :class:`SearchResult`. The aggregator never probes raw dictionaries.

Supported Sources:
    - DuckDuckGo Instant Answer API  -> InstantAnswerPayload
    - Wikipedia REST page summary    -> EncyclopediaSummaryPayload
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from searchdocs.shared.text import encode_uri_component

from .search import NO_URL, ResultSource, SearchResult

MAX_RELATED_TOPICS = 3
_TOPIC_TITLE_SEPARATOR = " - "
_TOPIC_TITLE_MAX_LEN = 60


def _text(value: Any) -> str:
    """Coerce an optional JSON field into a string ('' for missing/null)."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, slots=True)
class RelatedTopic:
    """One entry of ``RelatedTopics`` (grouped sub-topic entries have no Text)."""

    text: str = ""
    first_url: str = ""

    @property
    def title(self) -> str:
        """Text before the first ' - ', or the first 60 characters."""
        head = self.text.split(_TOPIC_TITLE_SEPARATOR, 1)[0]
        return head or self.text[:_TOPIC_TITLE_MAX_LEN]

    @classmethod
    def from_dict(cls, data: Any) -> RelatedTopic:
        if not isinstance(data, dict):
            return cls()
        return cls(text=_text(data.get("Text")), first_url=_text(data.get("FirstURL")))


@dataclass(frozen=True, slots=True)
class InstantAnswerPayload:
    """Fields of the instant-answer response that the pipeline consumes."""

    abstract: str = ""
    abstract_url: str = ""
    heading: str = ""
    definition: str = ""
    definition_url: str = ""
    related_topics: tuple[RelatedTopic, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InstantAnswerPayload:
        topics = data.get("RelatedTopics") or []
        if not isinstance(topics, list):
            topics = []
        return cls(
            abstract=_text(data.get("Abstract")),
            abstract_url=_text(data.get("AbstractURL")),
            heading=_text(data.get("Heading")),
            definition=_text(data.get("Definition")),
            definition_url=_text(data.get("DefinitionURL")),
            related_topics=tuple(RelatedTopic.from_dict(t) for t in topics),
        )

    def to_results(self, query: str) -> list[SearchResult]:
        """
        Emit up to: one overview, one definition, three related topics.

        Only the first three related topics are considered; entries without
        both text and URL are skipped, not replaced.
        """
        source = ResultSource.DUCKDUCKGO
        results: list[SearchResult] = []

        if self.abstract:
            results.append(
                SearchResult(
                    title=self.heading or f"{query} - Overview",
                    url=self.abstract_url or f"https://duckduckgo.com/?q={encode_uri_component(query)}",
                    snippet=self.abstract,
                    source=source,
                )
            )

        if self.definition and self.definition_url:
            results.append(
                SearchResult(
                    title=f"{query} - Definition",
                    url=self.definition_url,
                    snippet=self.definition,
                    source=source,
                )
            )

        for topic in self.related_topics[:MAX_RELATED_TOPICS]:
            if topic.text and topic.first_url:
                results.append(
                    SearchResult(
                        title=topic.title,
                        url=topic.first_url,
                        snippet=topic.text,
                        source=source,
                    )
                )

        return results


@dataclass(frozen=True, slots=True)
class EncyclopediaSummaryPayload:
    """Fields of the page-summary response that the pipeline consumes."""

    title: str = ""
    extract: str = ""
    page_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EncyclopediaSummaryPayload:
        content_urls = data.get("content_urls") or {}
        desktop = content_urls.get("desktop") if isinstance(content_urls, dict) else None
        page_url = desktop.get("page") if isinstance(desktop, dict) else None
        return cls(
            title=_text(data.get("title")),
            extract=_text(data.get("extract")),
            page_url=_text(page_url),
        )

    def to_results(self, query: str) -> list[SearchResult]:
        if not self.extract:
            return []
        return [
            SearchResult(
                title=self.title or query,
                url=self.page_url or NO_URL,
                snippet=self.extract,
                source=ResultSource.WIKIPEDIA,
            )
        ]


SourcePayload = InstantAnswerPayload | EncyclopediaSummaryPayload
