"""Domain Entities - value objects flowing through the search pipeline."""

from .documentation import (
    PDF_MEDIA_TYPE,
    TEXT_MEDIA_TYPE,
    DocumentationBundle,
    RenderedDocument,
)
from .notification import Notification
from .payloads import (
    EncyclopediaSummaryPayload,
    InstantAnswerPayload,
    RelatedTopic,
    SourcePayload,
)
from .search import (
    MAX_RESULTS,
    NO_URL,
    ResultSource,
    SearchResponse,
    SearchResult,
)

__all__ = [
    # Search
    "SearchResult",
    "SearchResponse",
    "ResultSource",
    "NO_URL",
    "MAX_RESULTS",
    # Payloads
    "InstantAnswerPayload",
    "EncyclopediaSummaryPayload",
    "RelatedTopic",
    "SourcePayload",
    # Documentation
    "DocumentationBundle",
    "RenderedDocument",
    "PDF_MEDIA_TYPE",
    "TEXT_MEDIA_TYPE",
    # Notifications
    "Notification",
]
