"""Tests for the dependency-injector ApplicationContainer."""

import pytest
from dependency_injector import providers

from searchdocs.application import CollectingNotifier, ResultAggregator, SearchDocsWorkflow
from searchdocs.config import Settings
from searchdocs.container import ApplicationContainer
from searchdocs.infrastructure.sources import DuckDuckGoClient, WikipediaClient


@pytest.fixture
def container():
    container = ApplicationContainer()
    container.config.from_dict(
        Settings(http_timeout=4.0, jsonp_timeout=1.5, cors_relay_url="https://relay.test/get").to_container_config()
    )
    return container


class TestApplicationContainer:
    def test_sources_configured(self, container):
        duckduckgo, wikipedia = container.sources()
        assert isinstance(duckduckgo, DuckDuckGoClient)
        assert isinstance(wikipedia, WikipediaClient)
        assert duckduckgo._timeout == 4.0
        assert duckduckgo._jsonp_timeout == 1.5
        assert duckduckgo._relay_url == "https://relay.test/get"
        assert wikipedia._timeout == 4.0

    def test_singletons(self, container):
        assert container.aggregator() is container.aggregator()
        assert container.rng() is container.rng()
        assert isinstance(container.aggregator(), ResultAggregator)

    def test_workflow_is_factory(self, container):
        first, second = container.workflow(), container.workflow()
        assert isinstance(first, SearchDocsWorkflow)
        assert first is not second
        assert first._aggregator is second._aggregator

    def test_per_call_notifier(self, container):
        notifier = CollectingNotifier()
        workflow = container.workflow(
            notifier=notifier,
            export_service=container.export_service(notifier=notifier),
        )
        assert workflow._notifier is notifier
        assert workflow._export_service._notifier is notifier

    @pytest.mark.asyncio
    async def test_override_sources(self, container, fake_source):
        fake = fake_source("DuckDuckGo")
        with container.sources.override(providers.Object([fake])):
            container.aggregator.reset()
            response = await container.aggregator().aggregate("rust")
        assert fake.calls == ["rust"]
        assert len(response.results) == 5
