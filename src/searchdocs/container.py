"""
Application DI Container (dependency-injector).

Centralizes construction of the source clients and pipeline services.

Usage::

    from searchdocs.config import Settings
    from searchdocs.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict(Settings.from_env().to_container_config())

    workflow = container.workflow()

    # In tests — override any provider:
    container.pdf_exporter.override(providers.Object(fake_exporter))
"""

from __future__ import annotations

import logging
import random

from dependency_injector import containers, providers

from searchdocs.application.documentation import DocumentSynthesizer
from searchdocs.application.export import ExportService, PdfExporter
from searchdocs.application.notifications import LoggingNotifier
from searchdocs.application.search import ResultAggregator
from searchdocs.application.workflow import SearchDocsWorkflow
from searchdocs.infrastructure.sources import DuckDuckGoClient, WikipediaClient

logger = logging.getLogger(__name__)


def _create_sources(
    duckduckgo: DuckDuckGoClient,
    wikipedia: WikipediaClient,
) -> list[object]:
    return [duckduckgo, wikipedia]


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for SearchDocs.

    - ``duckduckgo`` / ``wikipedia``: source clients (own an httpx.AsyncClient each)
    - ``aggregator``: concurrent search + backfill
    - ``synthesizer``: Markdown documentation
    - ``export_service``: PDF with text fallback
    - ``workflow``: the full user action
    """

    config = providers.Configuration()

    rng = providers.Singleton(random.Random)

    notifier = providers.Singleton(LoggingNotifier)

    duckduckgo = providers.Singleton(
        DuckDuckGoClient,
        timeout=config.http_timeout,
        jsonp_timeout=config.jsonp_timeout,
        relay_url=config.cors_relay_url,
        user_agent=config.user_agent,
    )

    wikipedia = providers.Singleton(
        WikipediaClient,
        timeout=config.http_timeout,
        user_agent=config.user_agent,
    )

    sources = providers.Singleton(
        _create_sources,
        duckduckgo=duckduckgo,
        wikipedia=wikipedia,
    )

    aggregator = providers.Singleton(
        ResultAggregator,
        sources=sources,
        rng=rng,
    )

    synthesizer = providers.Singleton(DocumentSynthesizer, rng=rng)

    pdf_exporter = providers.Singleton(PdfExporter)

    export_service = providers.Factory(
        ExportService,
        pdf_exporter=pdf_exporter,
        notifier=notifier,
    )

    workflow = providers.Factory(
        SearchDocsWorkflow,
        aggregator=aggregator,
        synthesizer=synthesizer,
        export_service=export_service,
        notifier=notifier,
    )


__all__ = ["ApplicationContainer"]
