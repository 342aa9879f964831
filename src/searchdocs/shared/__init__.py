"""
Shared module for SearchDocs.

Provides:
- Unified exception hierarchy
- Async utilities for concurrent source calls
- Text helpers (title casing, filenames)
"""

from .async_utils import (
    first_successful,
    gather_settled,
)
from .exceptions import (
    AggregationFailedError,
    EmptyQueryError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    JsonpError,
    ParseError,
    RenderingUnavailableError,
    SearchDocsError,
    SourceError,
    SourceUnavailableError,
    ValidationError,
)
from .text import encode_uri_component, export_filename, slugify_query, title_case

__all__ = [
    # Exceptions
    "SearchDocsError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "SourceError",
    "SourceUnavailableError",
    "JsonpError",
    "ParseError",
    "ValidationError",
    "EmptyQueryError",
    "AggregationFailedError",
    "RenderingUnavailableError",
    # Async utilities
    "gather_settled",
    "first_successful",
    # Text
    "title_case",
    "slugify_query",
    "export_filename",
    "encode_uri_component",
]
