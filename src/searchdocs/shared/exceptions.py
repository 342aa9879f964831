"""
Unified Exception Hierarchy for SearchDocs.

Exception Hierarchy:
    SearchDocsError (base)
    ├── SourceError
    │   ├── SourceUnavailableError
    │   │   └── JsonpError
    │   └── ParseError
    ├── ValidationError
    │   └── EmptyQueryError
    ├── AggregationFailedError
    └── RenderingUnavailableError

Propagation rules:
    - SourceError never leaves the source boundary of the aggregator
    - RenderingUnavailableError propagates exactly one level (to ExportService)
    - EmptyQueryError is raised before any network call
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = auto()      # Recoverable, can continue
    ERROR = auto()        # Failed, caller decides
    DEGRADED = auto()     # Completed with a fallback


class ErrorCategory(Enum):
    """Categories for error classification."""
    SOURCE = "source"
    VALIDATION = "validation"
    AGGREGATION = "aggregation"
    RENDERING = "rendering"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context attached to an error."""
    source: str | None = None
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None


class SearchDocsError(Exception):
    """
    Base exception for all SearchDocs errors.

    Provides:
    - Structured error context
    - Severity classification
    - User-facing formatting (title + description, like a toast)
    """

    __slots__ = ("context", "severity", "category")

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.SOURCE,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.source:
            result["source"] = self.context.source
        if self.context.operation:
            result["operation"] = self.context.operation
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        return result

    def to_agent_message(self) -> str:
        """Format for Agent consumption (Markdown)."""
        parts = [f"❌ **Error**: {self}"]
        if self.context.suggestion:
            parts.append(f"💡 **Suggestion**: {self.context.suggestion}")
        return "\n".join(parts)


# =============================================================================
# Source Errors
# =============================================================================

class SourceError(SearchDocsError):
    """Base class for errors raised while querying an external source."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext(source=source)
        if source and ctx.source is None:
            ctx = ErrorContext(
                source=source,
                operation=ctx.operation,
                input_value=ctx.input_value,
                suggestion=ctx.suggestion,
            )
        prefix = f"{ctx.source}: " if ctx.source else ""
        super().__init__(
            f"{prefix}{message}",
            context=ctx,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.SOURCE,
        )


class SourceUnavailableError(SourceError):
    """Raised when a single external source fails (network, HTTP status, timeout)."""

    def __init__(
        self,
        message: str = "Source unavailable",
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, source=source, context=context)


class JsonpError(SourceUnavailableError):
    """Raised when a JSONP request rejects (load error, bad callback, timeout)."""


class ParseError(SourceError):
    """Raised when a source payload cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(f"Parse error: {message}", source=source, context=context)


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(SearchDocsError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
        )


class EmptyQueryError(ValidationError):
    """Raised when the submitted query is blank or whitespace-only."""

    def __init__(
        self,
        query: str | None = None,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            source=ctx.source,
            operation=ctx.operation or "search",
            input_value=query,
            suggestion=ctx.suggestion or "Please enter a search query",
        )
        super().__init__("Please enter a search query", context=ctx)


# =============================================================================
# Pipeline Errors
# =============================================================================

class AggregationFailedError(SearchDocsError):
    """Raised for unexpected failures outside the per-source boundaries."""

    def __init__(
        self,
        message: str = "Search failed",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            source=ctx.source,
            operation=ctx.operation or "search",
            input_value=ctx.input_value,
            suggestion=ctx.suggestion or "Please try again with a different query",
        )
        super().__init__(
            message,
            context=ctx,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.AGGREGATION,
        )


class RenderingUnavailableError(SearchDocsError):
    """Raised when the document rendering capability is missing or fails."""

    def __init__(
        self,
        message: str = "Document rendering unavailable",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            source=ctx.source,
            operation=ctx.operation or "export",
            input_value=ctx.input_value,
            suggestion=ctx.suggestion or "Download as text file instead",
        )
        super().__init__(
            message,
            context=ctx,
            severity=ErrorSeverity.DEGRADED,
            category=ErrorCategory.RENDERING,
        )
