"""
Domain Layer - pure value objects with no I/O.

Import from the entities package:
    from searchdocs.domain.entities import SearchResult, SearchResponse
"""

from .entities import (
    DocumentationBundle,
    Notification,
    RenderedDocument,
    ResultSource,
    SearchResponse,
    SearchResult,
)

__all__ = [
    "SearchResult",
    "SearchResponse",
    "ResultSource",
    "DocumentationBundle",
    "RenderedDocument",
    "Notification",
]
