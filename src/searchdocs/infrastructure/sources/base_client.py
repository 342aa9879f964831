"""
Base API Client - Common HTTP request pattern for the reference sources.

Provides a reusable base class with:
- httpx.AsyncClient management
- Consistent error mapping (every failure becomes a SourceError)
- Hooks for service-specific status handling and response parsing

One attempt per request, no retry. Sources with an alternative retrieval
strategy (DuckDuckGo's relay fallback) compose it on top of this client.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from typing_extensions import Self

from searchdocs.shared.exceptions import ParseError, SourceUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "searchdocs-mcp/1.0"


class BaseAPIClient:
    """
    Base class for external API clients.

    Subclasses should set `_service_name` and can override:
    - `_handle_expected_status()`: Handle service-specific status codes (e.g., 404)
    - `_parse_response()`: Custom response processing

    Example:
        class MyClient(BaseAPIClient):
            _service_name = "MyAPI"

            def __init__(self):
                super().__init__(base_url="https://api.example.com")

            async def get_item(self, item_id: str) -> dict:
                return await self._make_request(f"/items/{item_id}")
    """

    _service_name: str = "API"

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            base_url: Base URL for the API (optional, can pass full URLs)
            timeout: Request timeout in seconds
            headers: Default headers for all requests
            user_agent: User-Agent header value
            client: Pre-built httpx client (tests, shared pools)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        default_headers = {"User-Agent": user_agent}
        default_headers.update(headers or {})
        self._client = client or httpx.AsyncClient(
            timeout=self._timeout,
            headers=default_headers,
            follow_redirects=True,
            limits=httpx.Limits(
                max_connections=10,
                max_keepalive_connections=5,
                keepalive_expiry=30.0,
            ),
        )

    @property
    def name(self) -> str:
        return self._service_name

    def _build_url(self, url: str) -> str:
        """Build full URL from path or full URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}{url}"

    async def _make_request(self, url: str) -> dict[str, Any]:
        """
        Make a single HTTP GET request.

        Args:
            url: Full URL or path (appended to base_url)

        Returns:
            Parsed JSON object

        Raises:
            SourceUnavailableError: Network failure, timeout or HTTP error status
            ParseError: Body is not a JSON object
        """
        full_url = self._build_url(url)
        try:
            response = await self._client.get(full_url)
        except httpx.TimeoutException as e:
            logger.warning(f"{self._service_name}: request timeout for {full_url}")
            raise SourceUnavailableError(f"Request timeout after {self._timeout}s", source=self._service_name) from e
        except httpx.RequestError as e:
            logger.warning(f"{self._service_name}: request error for {full_url}: {e}")
            raise SourceUnavailableError(f"Connection failed: {e}", source=self._service_name) from e

        expected = self._handle_expected_status(response, full_url)
        if expected is not _CONTINUE:
            return expected

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"{self._service_name} HTTP error {e.response.status_code}: {e.response.reason_phrase}"
            )
            raise SourceUnavailableError(
                f"HTTP {e.response.status_code}: {e.response.reason_phrase}",
                source=self._service_name,
            ) from e

        return self._parse_response(response)

    def _handle_expected_status(self, response: httpx.Response, url: str) -> Any:
        """
        Handle expected non-200 status codes.

        Override in subclasses for service-specific behavior.
        Return a value to short-circuit (e.g., an empty payload for 404).
        Return the sentinel _CONTINUE to continue normal processing.
        """
        return _CONTINUE

    def _parse_response(self, response: httpx.Response) -> dict[str, Any]:
        """Parse response body. Override for custom extraction logic."""
        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise ParseError("Invalid JSON response", source=self._service_name) from e
        if not isinstance(data, dict):
            raise ParseError(f"Expected JSON object, got {type(data).__name__}", source=self._service_name)
        return data

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()


# Sentinel object to indicate "continue normal processing" from _handle_expected_status
_CONTINUE = object()
