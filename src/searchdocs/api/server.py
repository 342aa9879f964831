"""
HTTP API Server for SearchDocs.

Runs the same pipeline as the MCP tools behind plain HTTP endpoints:

- ``GET  /health``: liveness
- ``POST /api/search``: search + synthesized documentation (JSON)
- ``POST /api/export``: the exported file itself (PDF or text fallback)
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from searchdocs import __version__
from searchdocs.application.notifications import CollectingNotifier
from searchdocs.application.workflow import SearchDocsWorkflow
from searchdocs.config import DEFAULT_API_PORT, Settings
from searchdocs.container import ApplicationContainer
from searchdocs.shared.exceptions import SearchDocsError, ValidationError

logger = logging.getLogger(__name__)


# Pydantic models for API requests / responses
class SearchRequest(BaseModel):
    """Search request body."""
    query: str = Field(..., description="Free-text topic")


class ExportRequest(BaseModel):
    """Export request body."""
    query: str = Field(..., description="Free-text topic")
    text_only: bool = Field(default=False, description="Skip the PDF and export plain text")


class SearchResultModel(BaseModel):
    title: str
    url: str
    snippet: str
    source: str


class SearchPayload(BaseModel):
    query: str
    totalResults: int
    searchTime: str
    results: List[SearchResultModel]


class DocumentationPayload(BaseModel):
    title: str
    quickGuide: str
    detailedDocumentation: str


class SearchDocsResponse(BaseModel):
    """Response of /api/search."""
    search: SearchPayload
    documentation: DocumentationPayload
    notifications: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _http_error(error: SearchDocsError, notifier: CollectingNotifier) -> HTTPException:
    status_code = 400 if isinstance(error, ValidationError) else 502
    return HTTPException(
        status_code=status_code,
        detail={**error.to_dict(), "notifications": notifier.to_list()},
    )


def create_api_server(
    container: Optional[ApplicationContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        container: Pre-configured DI container (tests pass one with overrides).
        settings: Used to configure a new container when none is given.

    Returns:
        Configured FastAPI instance.
    """
    if container is None:
        container = ApplicationContainer()
        container.config.from_dict((settings or Settings.from_env()).to_container_config())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("HTTP API server initialized")
        yield
        await container.aggregator().close()
        logger.info("HTTP API server shutting down")

    app = FastAPI(
        title="SearchDocs API",
        description="Search public reference sources and export generated documentation.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def workflow_for(notifier: CollectingNotifier) -> SearchDocsWorkflow:
        return container.workflow(
            notifier=notifier,
            export_service=container.export_service(notifier=notifier),
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.post(
        "/api/search",
        response_model=SearchDocsResponse,
        responses={400: {"description": "Blank query"}, 502: {"description": "Search failed"}},
    )
    async def search(request: SearchRequest):
        """Search all sources and synthesize documentation."""
        notifier = CollectingNotifier()
        try:
            outcome = await workflow_for(notifier).search(request.query)
        except SearchDocsError as e:
            raise _http_error(e, notifier) from e

        return {**outcome.to_dict(), "notifications": notifier.to_list()}

    @app.post(
        "/api/export",
        responses={
            200: {"content": {"application/pdf": {}, "text/plain": {}}},
            400: {"description": "Blank query"},
            502: {"description": "Search failed"},
        },
    )
    async def export(request: ExportRequest):
        """Search, synthesize and return the exported document as an attachment."""
        notifier = CollectingNotifier()
        workflow = workflow_for(notifier)
        try:
            outcome = await workflow.search(request.query)
            document = await workflow.export(outcome, text_only=request.text_only)
        except SearchDocsError as e:
            raise _http_error(e, notifier) from e

        return Response(
            content=document.content,
            media_type=document.media_type,
            headers={
                "Content-Disposition": f"attachment; filename*=UTF-8''{quote(document.filename)}",
                "X-SearchDocs-Degraded": "true" if document.degraded else "false",
                "X-SearchDocs-Pages": str(document.page_count),
            },
        )

    return app


def run_api_server(
    host: str = "127.0.0.1",
    port: Optional[int] = None,
    settings: Optional[Settings] = None,
):
    """
    Run the HTTP API server.

    Args:
        host: Host to bind to (default: 127.0.0.1 for local only)
        port: Port to bind to (default: SEARCHDOCS_HTTP_API_PORT or 8765)
        settings: Runtime settings (default: from environment)
    """
    import uvicorn

    settings = settings or Settings.from_env()
    port = port or settings.http_api_port or DEFAULT_API_PORT

    logger.info(f"Starting HTTP API server on {host}:{port}")
    uvicorn.run(create_api_server(settings=settings), host=host, port=port, log_level=settings.log_level.lower())


def main():
    import argparse

    parser = argparse.ArgumentParser(description="SearchDocs HTTP API Server")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    args = parser.parse_args()

    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_api_server(host=args.host, port=args.port, settings=settings)


if __name__ == "__main__":
    main()
