"""
SearchDocs - topic search and documentation generator

Searches public reference sources (DuckDuckGo instant answers, Wikipedia
summaries), synthesizes a Markdown quick guide and detailed guide, and exports
them as a PDF with a plain-text fallback.

Usage:
    from searchdocs import Settings, ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict(Settings.from_env().to_container_config())
    outcome, document = await container.workflow().run("rust programming")
    document.save("exports")
"""

from .config import Settings
from .container import ApplicationContainer
from .domain.entities import DocumentationBundle, RenderedDocument, SearchResponse, SearchResult

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "ApplicationContainer",
    "SearchResult",
    "SearchResponse",
    "DocumentationBundle",
    "RenderedDocument",
    "__version__",
]
