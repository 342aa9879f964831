"""
ResultAggregator - Multi-Source Result Merging and Backfill

Queries every configured source concurrently, normalizes their results into
one list, and pads it with synthetic filler when too few real results come
back.

Architecture Decision:
    Each source is isolated: any exception raised by ``source.search`` is
    logged and counted as zero results for that source. ``aggregate`` never
    raises for source failures.

Ordering:
    Real results appear in source *completion* order (network dependent),
    followed by filler. The list is truncated to MAX_RESULTS.

Example:
    >>> aggregator = ResultAggregator([DuckDuckGoClient(), WikipediaClient()])
    >>> response = await aggregator.aggregate("rust", on_progress=print)
    >>> len(response.results) <= 8
    True
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

from searchdocs.domain.entities import (
    MAX_RESULTS,
    ResultSource,
    SearchResponse,
    SearchResult,
)
from searchdocs.shared.async_utils import gather_settled
from searchdocs.shared.text import slugify_query

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

ProgressCallback: TypeAlias = "Callable[[float, str], None]"

# =============================================================================
# Constants
# =============================================================================

# Below this many real results the list is backfilled ...
MIN_REAL_RESULTS = 3
# ... up to this many entries.
BACKFILL_TARGET = 5

# Share of the progress bar covered by the source calls.
SEARCH_PROGRESS_SHARE = 80.0
PROCESSING_PROGRESS = 90.0

# Display-only metric ranges
TOTAL_RESULTS_RANGE = (10_000, 110_000)
SEARCH_TIME_MIN = 0.3
SEARCH_TIME_SPAN = 1.5

FILLER_TITLE_SUFFIXES: tuple[str, ...] = (
    "Guide",
    "Tutorial",
    "Documentation",
    "Best Practices",
    "Overview",
)


@runtime_checkable
class SearchSource(Protocol):
    """Anything that can turn a query into results (raising on failure)."""

    @property
    def name(self) -> str: ...

    async def search(self, query: str) -> list[SearchResult]: ...


def generate_filler_results(query: str, count: int) -> list[SearchResult]:
    """
    Build *count* synthetic results for *query*.

    Titles cycle through FILLER_TITLE_SUFFIXES, sources through the four
    placeholder engines.
    """
    sources = ResultSource.filler_sources()
    slug = slugify_query(query)
    fillers: list[SearchResult] = []
    for i in range(max(count, 0)):
        fillers.append(
            SearchResult(
                title=f"{query} - {FILLER_TITLE_SUFFIXES[i % len(FILLER_TITLE_SUFFIXES)]}",
                url=f"https://example{i + 1}.com/{slug}",
                snippet=(
                    f"Comprehensive information about {query}. This resource covers essential concepts, "
                    f"practical applications, and detailed explanations that will help you understand "
                    f"{query} better. Learn from expert insights and real-world examples."
                ),
                source=sources[i % len(sources)],
            )
        )
    return fillers


class ResultAggregator:
    """
    Concurrent multi-source search with per-source fault isolation.

    Args:
        sources: Source clients, queried concurrently
        rng: Random source for the display-only metrics
        max_results: Truncation limit for the merged list
    """

    def __init__(
        self,
        sources: Sequence[SearchSource],
        rng: random.Random | None = None,
        max_results: int = MAX_RESULTS,
    ) -> None:
        self._sources = tuple(sources)
        self._rng = rng or random.Random()
        self._max_results = max_results

    @property
    def sources(self) -> tuple[SearchSource, ...]:
        return self._sources

    async def aggregate(
        self,
        query: str,
        on_progress: ProgressCallback | None = None,
    ) -> SearchResponse:
        """
        Search all sources and build the response.

        ``on_progress(percent, message)`` is called once per finished source
        (success or failure) with ``completed / total * 80``, then once with
        90 after the join.
        """
        collected: list[SearchResult] = []
        total = len(self._sources) or 1
        completed = 0

        async def run_source(source: SearchSource) -> list[SearchResult]:
            nonlocal completed
            try:
                results = list(await source.search(query))
                message = f"Searched {source.name}"
            except Exception as e:
                logger.warning(f"{source.name} search failed: {e}")
                results = []
                message = f"{source.name} search completed"
            collected.extend(results)
            completed += 1
            self._report(on_progress, completed / total * SEARCH_PROGRESS_SHARE, message)
            return results

        await gather_settled(*(run_source(source) for source in self._sources))

        real_count = len(collected)
        if real_count < MIN_REAL_RESULTS:
            logger.info(f"Only {real_count} real results for {query!r}, adding {BACKFILL_TARGET - real_count} filler")
            collected.extend(generate_filler_results(query, BACKFILL_TARGET - real_count))

        self._report(on_progress, PROCESSING_PROGRESS, "Processing results")

        return SearchResponse(
            query=query,
            total_results=self._rng.randrange(*TOTAL_RESULTS_RANGE),
            search_time=SEARCH_TIME_MIN + self._rng.random() * SEARCH_TIME_SPAN,
            results=tuple(collected[: self._max_results]),
        )

    @staticmethod
    def _report(
        on_progress: ProgressCallback | None,
        percent: float,
        message: str,
    ) -> None:
        if on_progress is None:
            return
        try:
            on_progress(percent, message)
        except Exception:
            logger.exception(f"Progress callback failed at {percent:.0f}%")

    async def close(self) -> None:
        """Close sources that hold network resources."""
        for source in self._sources:
            close = getattr(source, "close", None)
            if close is not None:
                await close()
