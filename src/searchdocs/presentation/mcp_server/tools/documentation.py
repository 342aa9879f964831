"""
Documentation Tools - search the reference sources and build a guide.

Provides:
- search_web_sources: Aggregated results from DuckDuckGo and Wikipedia
- generate_documentation: Quick guide + detailed guide in Markdown
- export_documentation: PDF (or text fallback) written to the output directory
"""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from searchdocs.application.notifications import CollectingNotifier
from searchdocs.shared.exceptions import SearchDocsError

from ._common import WorkflowFactory, error_response, success_response

logger = logging.getLogger(__name__)


def register_documentation_tools(mcp: FastMCP, workflow_factory: WorkflowFactory, output_dir: str):
    """Register search, documentation and export tools."""

    @mcp.tool()
    async def search_web_sources(query: str) -> str:
        """
        Search DuckDuckGo and Wikipedia concurrently for a topic.

        Sources that fail are skipped. When fewer than 3 real results come
        back, placeholder results are added so at least 5 are returned; at
        most 8 results are returned.

        Args:
            query: Free-text topic, e.g. "rust programming"

        Returns:
            JSON with query, totalResults, searchTime, results[] (title, url,
            snippet, source) and the progress notifications.
        """
        notifier = CollectingNotifier()
        workflow = workflow_factory(notifier)
        try:
            outcome = await workflow.search(query)
        except SearchDocsError as e:
            return error_response(e, notifier)
        return success_response(outcome.response.to_dict(), notifier)

    @mcp.tool()
    async def generate_documentation(query: str) -> str:
        """
        Search and synthesize a Markdown guide for a topic.

        Args:
            query: Free-text topic

        Returns:
            JSON with title, quickGuide and detailedDocumentation (Markdown),
            plus the underlying search results.
        """
        notifier = CollectingNotifier()
        workflow = workflow_factory(notifier)
        try:
            outcome = await workflow.search(query)
        except SearchDocsError as e:
            return error_response(e, notifier)
        return success_response(outcome.to_dict(), notifier)

    @mcp.tool()
    async def export_documentation(query: str, text_only: bool = False) -> str:
        """
        Search, synthesize and export the guide as a downloadable file.

        A PDF is produced when rendering is available; otherwise the raw
        Markdown is written as a .txt file and ``degraded`` is true.

        Args:
            query: Free-text topic
            text_only: Skip the PDF and write the text export directly

        Returns:
            JSON with the saved file path, filename, media_type, page_count
            and degraded flag.
        """
        notifier = CollectingNotifier()
        workflow = workflow_factory(notifier)
        try:
            outcome = await workflow.search(query)
            document = await workflow.export(outcome, text_only=text_only)
        except SearchDocsError as e:
            return error_response(e, notifier)

        assert document is not None
        path = document.save(output_dir)
        logger.info(f"Exported {document.filename} to {path}")
        return success_response({"path": str(path), **document.to_dict()}, notifier)
