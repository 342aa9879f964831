"""
SearchDocs MCP Server

Exposes the search → documentation → export pipeline as MCP tools.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tools/: Tool implementations
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from searchdocs.application.notifications import Notifier
from searchdocs.application.workflow import SearchDocsWorkflow
from searchdocs.config import Settings
from searchdocs.container import ApplicationContainer

from .instructions import SERVER_INSTRUCTIONS
from .tools import register_all_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

logger = logging.getLogger(__name__)

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        logger.info("Lifecycle: startup — resources ready")
        try:
            yield container
        finally:
            await container.aggregator().close()
            logger.info("Lifecycle: shutdown — source clients closed")

    return _lifespan


def make_workflow_factory(container: ApplicationContainer) -> Callable[[Notifier], SearchDocsWorkflow]:
    """Per-call workflows that report to the given notifier."""

    def factory(notifier: Notifier) -> SearchDocsWorkflow:
        return container.workflow(
            notifier=notifier,
            export_service=container.export_service(notifier=notifier),
        )

    return factory


def create_server(
    settings: Settings | None = None,
    name: str = "searchdocs",
    json_response: bool = False,
    stateless_http: bool = False,
) -> FastMCP:
    """
    Create and configure the SearchDocs MCP server.

    Args:
        settings: Runtime settings. Default: read from the environment.
        name: Server name.
        json_response: Use JSON responses instead of SSE.
        stateless_http: Use stateless HTTP mode.

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    settings = settings or Settings.from_env()
    logger.info("Initializing SearchDocs MCP Server...")

    _container = ApplicationContainer()
    _container.config.from_dict(settings.to_container_config())

    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        json_response=json_response,
        stateless_http=stateless_http,
        lifespan=_make_lifespan(_container),
    )

    tools = register_all_tools(mcp, make_workflow_factory(_container), settings.output_dir)
    logger.info("Tool registration complete: %s", ", ".join(tools))
    logger.info("Export directory: %s", settings.output_dir)

    return mcp


def main():
    """Run the MCP server over stdio."""
    settings = Settings.from_env()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    server = create_server(settings)
    server.run()


if __name__ == "__main__":
    main()
