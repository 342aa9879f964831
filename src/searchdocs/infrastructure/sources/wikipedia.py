"""
Wikipedia REST API Integration

API Documentation: https://en.wikipedia.org/api/rest_v1/

Uses the page summary endpoint (``/page/summary/{title}``), which returns
the lead extract of the page whose title matches the query. Fields consumed:
title, extract, content_urls.desktop.page.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from searchdocs.domain.entities import EncyclopediaSummaryPayload, SearchResult
from searchdocs.infrastructure.sources.base_client import _CONTINUE, BaseAPIClient
from searchdocs.shared.text import encode_uri_component

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

WIKIPEDIA_API_BASE = "https://en.wikipedia.org/api/rest_v1"


class WikipediaClient(BaseAPIClient):
    """
    Encyclopedia summary client.

    Usage:
        async with WikipediaClient() as client:
            results = await client.search("Rust (programming language)")
    """

    _service_name = "Wikipedia"

    def __init__(self, timeout: float = 30.0, **kwargs: Any) -> None:
        super().__init__(
            base_url=WIKIPEDIA_API_BASE,
            timeout=timeout,
            headers={"Accept": "application/json"},
            **kwargs,
        )

    @staticmethod
    def build_summary_url(query: str) -> str:
        return f"{WIKIPEDIA_API_BASE}/page/summary/{encode_uri_component(query)}"

    def _handle_expected_status(self, response: httpx.Response, url: str) -> Any:
        """Handle 404 (no page with that title) as an empty summary."""
        if response.status_code == 404:
            logger.debug(f"Wikipedia: page not found - {url}")
            return {}
        return _CONTINUE

    async def fetch_summary(self, query: str) -> EncyclopediaSummaryPayload:
        data = await self._make_request(self.build_summary_url(query))
        return EncyclopediaSummaryPayload.from_dict(data if isinstance(data, dict) else {})

    async def search(self, query: str) -> list[SearchResult]:
        """At most one result, present only when the extract is non-empty."""
        summary = await self.fetch_summary(query)
        return summary.to_results(query)
