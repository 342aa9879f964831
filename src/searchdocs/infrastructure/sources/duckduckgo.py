"""
DuckDuckGo Instant Answer API Integration

API Documentation: https://duckduckgo.com/duckduckgo-help-pages/open-source/instant-answer-interface/

Retrieval strategies, tried in order:
1. JSONP: the endpoint is called with a per-request ``callback`` token and the
   wrapped payload is unwrapped (10 second timeout).
2. CORS relay: the same URL is fetched through a generic relay
   (api.allorigins.win) whose JSON envelope carries the target body as a
   string in ``contents``.

Payload fields consumed: Abstract, AbstractURL, Heading, Definition,
DefinitionURL, RelatedTopics[].Text, RelatedTopics[].FirstURL.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from searchdocs.domain.entities import InstantAnswerPayload, SearchResult
from searchdocs.infrastructure.sources.base_client import BaseAPIClient
from searchdocs.infrastructure.sources.jsonp import DEFAULT_JSONP_TIMEOUT, jsonp_request
from searchdocs.shared.async_utils import first_successful
from searchdocs.shared.exceptions import ParseError
from searchdocs.shared.text import encode_uri_component

logger = logging.getLogger(__name__)

DUCKDUCKGO_API_BASE = "https://api.duckduckgo.com/"
DEFAULT_CORS_RELAY = "https://api.allorigins.win/get"


class DuckDuckGoClient(BaseAPIClient):
    """
    Instant-answer client with JSONP-then-relay retrieval.

    Usage:
        async with DuckDuckGoClient() as client:
            results = await client.search("rust")
    """

    _service_name = "DuckDuckGo"

    def __init__(
        self,
        timeout: float = 30.0,
        jsonp_timeout: float = DEFAULT_JSONP_TIMEOUT,
        relay_url: str = DEFAULT_CORS_RELAY,
        **kwargs: Any,
    ) -> None:
        """
        Initialize DuckDuckGo client.

        Args:
            timeout: Request timeout for the relay fallback
            jsonp_timeout: Seconds to wait for the JSONP callback
            relay_url: CORS relay endpoint taking a ``url`` query parameter
        """
        super().__init__(timeout=timeout, headers={"Accept": "application/json"}, **kwargs)
        self._jsonp_timeout = jsonp_timeout
        self._relay_url = relay_url

    @staticmethod
    def build_search_url(query: str) -> str:
        """Instant-answer URL: JSON output, no HTML, no disambiguation pages."""
        return f"{DUCKDUCKGO_API_BASE}?q={encode_uri_component(query)}&format=json&no_html=1&skip_disambig=1"

    def build_relay_url(self, target_url: str) -> str:
        return f"{self._relay_url}?url={encode_uri_component(target_url)}"

    async def _fetch_jsonp(self, url: str) -> dict[str, Any]:
        data = await jsonp_request(
            self._client,
            url,
            timeout=self._jsonp_timeout,
            source=self._service_name,
        )
        if not isinstance(data, dict):
            raise ParseError("JSONP payload is not an object", source=self._service_name)
        return data

    async def _fetch_via_relay(self, url: str) -> dict[str, Any]:
        envelope = await self._make_request(self.build_relay_url(url))
        contents = envelope.get("contents") if isinstance(envelope, dict) else None
        if not isinstance(contents, str):
            raise ParseError("Relay envelope has no 'contents' string", source=self._service_name)
        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise ParseError(f"Relayed body is not JSON: {e}", source=self._service_name) from e
        if not isinstance(data, dict):
            raise ParseError("Relayed payload is not an object", source=self._service_name)
        return data

    async def fetch_payload(self, query: str) -> InstantAnswerPayload:
        """
        Fetch the instant answer for *query*.

        The relay is only contacted when the JSONP strategy fails.

        Raises:
            SourceError: When both strategies fail
        """
        url = self.build_search_url(query)
        data = await first_successful(
            [
                lambda: self._fetch_jsonp(url),
                lambda: self._fetch_via_relay(url),
            ],
            label=self._service_name,
        )
        return InstantAnswerPayload.from_dict(data)

    async def search(self, query: str) -> list[SearchResult]:
        """Overview, definition and up to three related-topic results."""
        payload = await self.fetch_payload(query)
        results = payload.to_results(query)
        logger.debug(f"DuckDuckGo: {len(results)} results for {query!r}")
        return results
