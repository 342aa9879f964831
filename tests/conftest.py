"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import asyncio
import random
from datetime import date

import pytest

from searchdocs.domain.entities import DocumentationBundle, ResultSource, SearchResult

# ============================================================
# Fake collaborators
# ============================================================


class FakeSource:
    """SearchSource stand-in: returns fixed results or raises."""

    def __init__(self, name, results=None, error=None, delay=0.0):
        self._name = name
        self._results = list(results or [])
        self._error = error
        self._delay = delay
        self.calls = []
        self.closed = False

    @property
    def name(self):
        return self._name

    async def search(self, query):
        self.calls.append(query)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return list(self._results)

    async def close(self):
        self.closed = True


class FakeCanvas:
    """DocumentCanvas stand-in recording every draw call per page."""

    def __init__(self, page_width=210.0, page_height=297.0, char_width=2.0, chars_per_line=80):
        self.page_width = page_width
        self.page_height = page_height
        self._char_width = char_width
        self._chars_per_line = chars_per_line
        self._pages = 1
        self._current = 1
        self.font = (10, "normal")
        self.drawn = []

    def add_page(self):
        self._pages += 1
        self._current = self._pages

    def set_font(self, size, style="normal"):
        self.font = (size, style)

    def text_width(self, text):
        return len(text) * self._char_width

    def split_text(self, text, max_width):
        if not text:
            return [""]
        n = self._chars_per_line
        return [text[i : i + n] for i in range(0, len(text), n)]

    def draw_text(self, text, x, y):
        self.drawn.append({"page": self._current, "text": text, "x": x, "y": y, "font": self.font})

    @property
    def page_count(self):
        return self._pages

    def set_page(self, page_number):
        self._current = page_number

    def output(self):
        return b"%PDF-fake"

    def texts(self):
        return [d["text"] for d in self.drawn]


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def make_result():
    """Factory for SearchResult with sensible defaults."""

    def _make(title="Result", url="https://example.org", snippet="", source=ResultSource.WIKIPEDIA):
        return SearchResult(title=title, url=url, snippet=snippet, source=source)

    return _make


@pytest.fixture
def wikipedia_rust_result():
    return SearchResult(
        title="Rust",
        url="https://en.wikipedia.org/wiki/Rust",
        snippet="Rust is an iron oxide, a usually reddish-brown oxide formed by the reaction of iron and oxygen.",
        source=ResultSource.WIKIPEDIA,
    )


@pytest.fixture
def duckduckgo_rust_result():
    return SearchResult(
        title="Rust",
        url="https://duckduckgo.com/Rust",
        snippet="Rust is a general-purpose programming language. It is important for how memory safety is enforced.",
        source=ResultSource.DUCKDUCKGO,
    )


@pytest.fixture
def fake_source():
    return FakeSource


@pytest.fixture
def fake_canvas():
    return FakeCanvas()


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def fixed_today():
    return lambda: date(2025, 3, 7)


@pytest.fixture
def sample_bundle():
    return DocumentationBundle(
        title="Complete Guide to rust lang",
        quick_guide="# Quick Start Guide for Rust Lang\n\n## Key Benefits:\n• **Fast** builds",
        detailed_documentation="# Complete Documentation for Rust Lang\n\n- [Rust](https://x.y)\nPlain line",
        query="rust lang",
    )
