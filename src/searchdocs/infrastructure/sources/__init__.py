"""
Reference source clients.

Each client exposes ``name`` and ``async search(query) -> list[SearchResult]``
and raises a SourceError on failure.
"""

from .base_client import BaseAPIClient
from .duckduckgo import DEFAULT_CORS_RELAY, DuckDuckGoClient
from .jsonp import jsonp_request, new_callback_token, unwrap_jsonp
from .wikipedia import WikipediaClient

__all__ = [
    "BaseAPIClient",
    "DuckDuckGoClient",
    "WikipediaClient",
    "DEFAULT_CORS_RELAY",
    "jsonp_request",
    "new_callback_token",
    "unwrap_jsonp",
]
