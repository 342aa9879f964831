"""Tests for ResultAggregator — concurrency, fault isolation, backfill and progress."""

import asyncio
import random
from collections import Counter

import httpx
import pytest

from searchdocs.application.search import (
    ResultAggregator,
    generate_filler_results,
)
from searchdocs.domain.entities import ResultSource
from searchdocs.infrastructure.sources import DuckDuckGoClient, WikipediaClient
from searchdocs.shared.exceptions import SourceUnavailableError


class TestGenerateFillerResults:
    def test_titles_urls_and_sources_cycle(self):
        fillers = generate_filler_results("Machine Learning", 5)
        assert [f.title for f in fillers] == [
            "Machine Learning - Guide",
            "Machine Learning - Tutorial",
            "Machine Learning - Documentation",
            "Machine Learning - Best Practices",
            "Machine Learning - Overview",
        ]
        assert fillers[0].url == "https://example1.com/machine-learning"
        assert fillers[4].url == "https://example5.com/machine-learning"
        assert [f.source for f in fillers] == ["Google", "Bing", "Yahoo", "Baidu", "Google"]

    def test_snippet_mentions_query(self):
        [filler] = generate_filler_results("rust", 1)
        assert filler.snippet.startswith("Comprehensive information about rust.")
        assert "understand rust better" in filler.snippet

    def test_zero_or_negative(self):
        assert generate_filler_results("q", 0) == []
        assert generate_filler_results("q", -2) == []


class TestAggregate:
    @pytest.mark.asyncio
    async def test_rust_scenario(self, fake_source, duckduckgo_rust_result, wikipedia_rust_result):
        """One result per source → 2 real + 3 filler."""
        ddg = fake_source("DuckDuckGo", results=[duckduckgo_rust_result], delay=0.01)
        wiki = fake_source("Wikipedia", results=[wikipedia_rust_result])
        response = await ResultAggregator([ddg, wiki], rng=random.Random(1)).aggregate("rust")

        assert len(response.results) == 5
        assert response.results[:2] == (wikipedia_rust_result, duckduckgo_rust_result)
        assert [r.title for r in response.results[2:]] == ["rust - Guide", "rust - Tutorial", "rust - Documentation"]
        assert [r.source for r in response.results[2:]] == ["Google", "Bing", "Yahoo"]

    @pytest.mark.asyncio
    async def test_single_real_result(self, fake_source, wikipedia_rust_result):
        ddg = fake_source("DuckDuckGo", results=[])
        wiki = fake_source("Wikipedia", results=[wikipedia_rust_result])
        response = await ResultAggregator([ddg, wiki]).aggregate("rust")

        assert len(response.results) == 5
        assert response.results[0] == wikipedia_rust_result
        assert [r.source for r in response.results[1:]] == ["Google", "Bing", "Yahoo", "Baidu"]

    @pytest.mark.asyncio
    async def test_two_real_results_backfilled_to_five(self, fake_source, make_result):
        ddg = fake_source("DuckDuckGo", results=[make_result("Rust", source=ResultSource.DUCKDUCKGO)])
        wiki = fake_source("Wikipedia", results=[make_result("Rust (metal)")])
        response = await ResultAggregator([ddg, wiki]).aggregate("rust")

        assert len(response.results) == 5
        real = [r for r in response.results if r.source in ("DuckDuckGo", "Wikipedia")]
        assert len(real) == 2
        assert response.results[2].title == "rust - Guide"

    @pytest.mark.asyncio
    async def test_three_real_results_not_backfilled(self, fake_source, make_result):
        ddg = fake_source("DuckDuckGo", results=[make_result(f"d{i}", source=ResultSource.DUCKDUCKGO) for i in range(2)])
        wiki = fake_source("Wikipedia", results=[make_result("w")])
        response = await ResultAggregator([ddg, wiki]).aggregate("rust")
        assert len(response.results) == 3

    @pytest.mark.asyncio
    async def test_capped_at_eight(self, fake_source, make_result):
        ddg = fake_source("DuckDuckGo", results=[make_result(f"d{i}", source=ResultSource.DUCKDUCKGO) for i in range(5)])
        wiki = fake_source("Wikipedia", results=[make_result(f"w{i}") for i in range(5)])
        response = await ResultAggregator([ddg, wiki]).aggregate("rust")
        assert len(response.results) == 8

    @pytest.mark.asyncio
    async def test_failing_sources_isolated(self, fake_source):
        ddg = fake_source("DuckDuckGo", error=SourceUnavailableError("JSONP request timeout", source="DuckDuckGo"))
        wiki = fake_source("Wikipedia", error=RuntimeError("unexpected"))
        response = await ResultAggregator([ddg, wiki]).aggregate("rust")

        assert len(response.results) == 5
        assert {r.source for r in response.results} <= set(ResultSource.filler_sources())

    @pytest.mark.asyncio
    async def test_completion_order(self, fake_source, make_result):
        slow = fake_source("DuckDuckGo", results=[make_result("slow", source=ResultSource.DUCKDUCKGO)], delay=0.05)
        fast = fake_source("Wikipedia", results=[make_result("fast")])
        response = await ResultAggregator([slow, fast]).aggregate("q")
        assert [r.title for r in response.results[:2]] == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_query_passed_unmodified(self, fake_source):
        ddg = fake_source("DuckDuckGo")
        wiki = fake_source("Wikipedia")
        response = await ResultAggregator([ddg, wiki]).aggregate("  Rust Lang ")
        assert ddg.calls == ["  Rust Lang "]
        assert wiki.calls == ["  Rust Lang "]
        assert response.query == "  Rust Lang "

    @pytest.mark.asyncio
    async def test_display_metrics_in_range(self, fake_source):
        agg = ResultAggregator([fake_source("DuckDuckGo"), fake_source("Wikipedia")], rng=random.Random(3))
        for _ in range(20):
            response = await agg.aggregate("q")
            assert 10_000 <= response.total_results < 110_000
            assert 0.3 <= response.search_time < 1.8

    @pytest.mark.asyncio
    async def test_seeded_metrics_reproducible(self, fake_source):
        sources = [fake_source("DuckDuckGo"), fake_source("Wikipedia")]
        a = await ResultAggregator(sources, rng=random.Random(9)).aggregate("q")
        b = await ResultAggregator(sources, rng=random.Random(9)).aggregate("q")
        assert (a.total_results, a.search_time) == (b.total_results, b.search_time)


class TestProgress:
    @pytest.mark.asyncio
    async def test_progress_sequence(self, fake_source, make_result):
        ddg = fake_source("DuckDuckGo", error=SourceUnavailableError("down"), delay=0.05)
        wiki = fake_source("Wikipedia", results=[make_result("w")])
        events = []
        await ResultAggregator([ddg, wiki]).aggregate("q", on_progress=lambda p, m: events.append((p, m)))

        assert events == [
            (40.0, "Searched Wikipedia"),
            (80.0, "DuckDuckGo search completed"),
            (90.0, "Processing results"),
        ]

    @pytest.mark.asyncio
    async def test_progress_callback_errors_do_not_abort(self, fake_source):
        def broken(percent, message):
            raise ValueError("ui gone")

        response = await ResultAggregator([fake_source("DuckDuckGo"), fake_source("Wikipedia")]).aggregate(
            "q", on_progress=broken
        )
        assert len(response.results) == 5


class TestInvariants:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(("n_ddg", "n_wiki"), [(0, 0), (0, 1), (1, 1), (2, 1), (5, 1), (5, 5)])
    async def test_size_bounds(self, fake_source, make_result, n_ddg, n_wiki):
        ddg = fake_source("DuckDuckGo", results=[make_result(f"d{i}", source=ResultSource.DUCKDUCKGO) for i in range(n_ddg)])
        wiki = fake_source("Wikipedia", results=[make_result(f"w{i}") for i in range(n_wiki)])
        response = await ResultAggregator([ddg, wiki]).aggregate("q")

        real = n_ddg + n_wiki
        expected = 5 if real < 3 else min(real, 8)
        assert len(response.results) == expected
        counts = Counter(r.source for r in response.results)
        assert counts["DuckDuckGo"] + counts["Wikipedia"] == min(real, 8)


class TestClose:
    @pytest.mark.asyncio
    async def test_close_closes_sources(self, fake_source):
        ddg, wiki = fake_source("DuckDuckGo"), fake_source("Wikipedia")
        await ResultAggregator([ddg, wiki]).close()
        assert ddg.closed and wiki.closed


class TestWithSourceClients:
    @pytest.mark.asyncio
    async def test_duckduckgo_down_wikipedia_without_link(self):
        async def handler(request):
            if request.url.host == "api.duckduckgo.com":
                await asyncio.sleep(1.0)
                return httpx.Response(504)
            if request.url.host == "api.allorigins.win":
                return httpx.Response(502)
            return httpx.Response(200, json={"title": "Rust", "extract": "Rust is an iron oxide."})

        transport = httpx.MockTransport(handler)
        duckduckgo = DuckDuckGoClient(jsonp_timeout=0.05, client=httpx.AsyncClient(transport=transport))
        wikipedia = WikipediaClient(client=httpx.AsyncClient(transport=transport))
        aggregator = ResultAggregator([duckduckgo, wikipedia], rng=random.Random(0))
        progress = []

        try:
            response = await aggregator.aggregate("rust", on_progress=lambda p, m: progress.append(p))
        finally:
            await aggregator.close()

        assert [str(r.source) for r in response.results] == ["Wikipedia", "Google", "Bing", "Yahoo", "Baidu"]
        assert response.results[0].title == "Rust"
        assert response.results[0].url == "#"
        assert progress == [40.0, 80.0, 90.0]
