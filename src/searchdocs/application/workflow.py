"""
SearchDocsWorkflow - one user action from query to downloadable document.

    search(query)
      validate → aggregate (progress 0-90) → "Generating documentation..." (95)
      → synthesize → "Search completed successfully!"
    export(outcome)
      PDF, or plain text when rendering is unavailable

Every step reports through the injected Notifier, so the CLI, HTTP and MCP
surfaces show the same messages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from searchdocs.domain.entities import (
    DocumentationBundle,
    Notification,
    RenderedDocument,
    SearchResponse,
)
from searchdocs.shared.exceptions import AggregationFailedError, EmptyQueryError

from .documentation import DocumentSynthesizer
from .export import ExportService
from .notifications import LoggingNotifier, Notifier
from .search import ProgressCallback, ResultAggregator, validate_query

logger = logging.getLogger(__name__)

PROGRESS_DURATION_MS = 1500
SYNTHESIS_PROGRESS = 95.0


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """Everything a finished search hands to the export step."""

    response: SearchResponse
    documentation: DocumentationBundle

    @property
    def query(self) -> str:
        return self.response.query

    def to_dict(self) -> dict[str, Any]:
        return {
            "search": self.response.to_dict(),
            "documentation": self.documentation.to_dict(),
        }


class SearchDocsWorkflow:
    def __init__(
        self,
        aggregator: ResultAggregator,
        synthesizer: DocumentSynthesizer,
        export_service: ExportService,
        notifier: Notifier | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._synthesizer = synthesizer
        self._export_service = export_service
        self._notifier = notifier or LoggingNotifier()

    async def search(
        self,
        query: str,
        on_progress: ProgressCallback | None = None,
    ) -> SearchOutcome:
        """
        Run the search and synthesize documentation.

        Raises:
            EmptyQueryError: Blank query; no source is contacted
            AggregationFailedError: Anything unexpected after validation
        """
        try:
            validate_query(query)
        except EmptyQueryError:
            self._notifier.notify(Notification("Please enter a search query", destructive=True))
            raise

        def report(percent: float, message: str) -> None:
            self._notifier.notify(Notification(message, duration_ms=PROGRESS_DURATION_MS))
            if on_progress is not None:
                on_progress(percent, message)

        try:
            response = await self._aggregator.aggregate(query, on_progress=report)
            report(SYNTHESIS_PROGRESS, "Generating documentation...")
            documentation = self._synthesizer.synthesize(query, response.results)
        except Exception as e:
            logger.exception(f"Search failed for {query!r}")
            self._notifier.notify(
                Notification("Search failed", "Please try again with a different query", destructive=True)
            )
            raise AggregationFailedError() from e

        self._notifier.notify(
            Notification(
                "Search completed successfully!",
                f"Found {response.total_results:,} results across multiple search engines",
            )
        )
        return SearchOutcome(response=response, documentation=documentation)

    async def export(
        self,
        outcome: SearchOutcome | None,
        text_only: bool = False,
    ) -> RenderedDocument | None:
        """Export a finished search; returns None when there is nothing to export."""
        if outcome is None:
            self._notifier.notify(
                Notification("No data to export", "Please perform a search first", destructive=True)
            )
            return None
        return await self._export_service.export(
            outcome.documentation,
            outcome.response.results,
            text_only=text_only,
        )

    async def run(self, query: str, text_only: bool = False) -> tuple[SearchOutcome, RenderedDocument]:
        """Search then export, as the CLI does."""
        outcome = await self.search(query)
        document = await self.export(outcome, text_only=text_only)
        assert document is not None
        return outcome, document

    async def close(self) -> None:
        await self._aggregator.close()
