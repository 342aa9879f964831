"""
Surface-level text extraction from search results.

Two heuristics feed the documentation templates:

- Key points: sentence fragments that look like claims worth repeating
- Concepts: distinctive lower-case words that are not part of the query

Neither is linguistic analysis; both are plain string tests, kept
deterministic so the generated guide only varies by its concept descriptions.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from searchdocs.domain.entities import SearchResult

MAX_KEY_POINTS = 8
MAX_CONCEPTS = 12
MIN_FRAGMENT_LENGTH = 20
MIN_CONCEPT_LENGTH = 4

# Matched against the lower-cased fragment
KEY_POINT_MARKERS: tuple[str, ...] = ("important", "key", "essential", "benefits")
# Matched against the fragment as written
CASE_SENSITIVE_MARKERS: tuple[str, ...] = ("use", "how")

STOP_WORDS: frozenset[str] = frozenset(
    {"the", "and", "for", "are", "with", "this", "that", "from", "have", "will"}
)

# ASCII so the boundary matches the browser regex ``\b[a-z]{3,}\b``.
_WORD_PATTERN = re.compile(r"\b[a-z]{3,}\b", re.ASCII)


def _is_key_point(fragment: str) -> bool:
    lowered = fragment.lower()
    if any(marker in lowered for marker in KEY_POINT_MARKERS):
        return True
    return any(marker in fragment for marker in CASE_SENSITIVE_MARKERS)


def extract_key_points(results: Iterable[SearchResult], limit: int = MAX_KEY_POINTS) -> list[str]:
    """
    Collect candidate key points from the result snippets.

    Each snippet is split on ``.``; fragments longer than 20 characters
    (after trimming) that contain a marker word are kept, trimmed. The output
    is de-duplicated in first-seen order and capped at *limit*.

    >>> r = SearchResult("T", "#", "This is how you use the borrow checker. Short.", "Wikipedia")
    >>> extract_key_points([r])
    ['This is how you use the borrow checker']
    """
    points: list[str] = []
    for result in results:
        for fragment in result.snippet.split("."):
            if len(fragment.strip()) <= MIN_FRAGMENT_LENGTH:
                continue
            if _is_key_point(fragment):
                points.append(fragment.strip())
    return list(dict.fromkeys(points))[:limit]


def extract_concepts(
    query: str,
    results: Iterable[SearchResult],
    limit: int = MAX_CONCEPTS,
) -> list[str]:
    """Distinct words (len > 3) from titles and snippets, in encounter order."""
    query_words = set(query.lower().split(" "))
    concepts: dict[str, None] = {}
    for result in results:
        text = f"{result.title} {result.snippet}".lower()
        for word in _WORD_PATTERN.findall(text):
            if len(word) < MIN_CONCEPT_LENGTH or word in query_words or word in STOP_WORDS:
                continue
            concepts.setdefault(word, None)
    return list(concepts)[:limit]


def group_by_source(results: Sequence[SearchResult]) -> dict[str, list[SearchResult]]:
    """Insertion-ordered map from source name to its results."""
    groups: dict[str, list[SearchResult]] = {}
    for result in results:
        groups.setdefault(str(result.source), []).append(result)
    return groups
