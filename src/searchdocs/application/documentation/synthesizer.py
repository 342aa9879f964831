"""
DocumentSynthesizer - turns a query and its results into two Markdown guides.

Example:
    >>> synthesizer = DocumentSynthesizer(rng=random.Random(7))
    >>> bundle = synthesizer.synthesize("rust", response.results)
    >>> bundle.title
    'Complete Guide to rust'
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from datetime import date

from searchdocs.domain.entities import DocumentationBundle, SearchResult

from .extraction import extract_concepts, extract_key_points
from .templates import render_detailed_documentation, render_quick_guide

logger = logging.getLogger(__name__)


class DocumentSynthesizer:
    """
    Stateless apart from its injected randomness and clock.

    Args:
        rng: Picks concept descriptions; pass a seeded Random for reproducible output
        today: Returns the date printed in the detailed guide's footer
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._today = today or date.today

    def synthesize(self, query: str, results: Sequence[SearchResult]) -> DocumentationBundle:
        key_points = extract_key_points(results)
        concepts = extract_concepts(query, results)
        logger.debug(f"Synthesizing {query!r}: {len(key_points)} key points, {len(concepts)} concepts")

        return DocumentationBundle(
            title=f"Complete Guide to {query}",
            quick_guide=render_quick_guide(query, key_points, concepts),
            detailed_documentation=render_detailed_documentation(
                query,
                key_points,
                concepts,
                results,
                rng=self._rng,
                today=self._today(),
            ),
            query=query,
        )
