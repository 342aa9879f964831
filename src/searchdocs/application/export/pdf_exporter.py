"""
PdfExporter - paginated PDF rendering of a DocumentationBundle.

Layout:
    Title → metadata → static table of contents → quick guide →
    per-result summary → detailed documentation → footer on every page.

    Positions are absolute (millimetres from the top-left corner); a running
    cursor decides where the next line goes and when a new page starts.

The drawing backend is a :class:`DocumentCanvas`. The default one is fpdf2,
loaded on first use; when it cannot be loaded, or any drawing step fails,
:class:`RenderingUnavailableError` is raised so the caller can fall back to a
plain-text export.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from typing import TypeAlias

from searchdocs.application.documentation.templates import format_date
from searchdocs.domain.entities import (
    PDF_MEDIA_TYPE,
    DocumentationBundle,
    RenderedDocument,
    SearchResult,
)
from searchdocs.infrastructure.rendering import DocumentCanvas, FontStyle
from searchdocs.shared.exceptions import RenderingUnavailableError
from searchdocs.shared.text import export_filename

from .markdown import FormattedLine, LineKind, parse_markdown

logger = logging.getLogger(__name__)

CanvasFactory: TypeAlias = Callable[[], DocumentCanvas | None]

MARGIN = 20.0
LINE_HEIGHT_FACTOR = 0.6
FOOTER_OFFSET = 10.0
FOOTER_TEXT = "SearchDocs AI - Generated Documentation"
PAGE_LABEL_WIDTH = 20.0

# heading level -> (space before, font size, space after)
HEADING_STYLES: dict[int, tuple[float, float, float]] = {
    1: (8, 14, 4),
    2: (6, 12, 3),
    3: (4, 11, 2),
}

TABLE_OF_CONTENTS = (
    "1. Quick Guide",
    "2. Search Results Summary",
    "3. Complete Documentation",
)


def load_default_canvas() -> DocumentCanvas:
    """Create the fpdf2 canvas, importing the backend lazily."""
    try:
        from searchdocs.infrastructure.rendering.fpdf_canvas import create_fpdf_canvas
    except ImportError as e:
        raise RenderingUnavailableError(f"PDF backend not installed: {e}") from e
    return create_fpdf_canvas()


class PdfLayout:
    """Cursor-driven writer on top of a canvas."""

    def __init__(self, canvas: DocumentCanvas, margin: float = MARGIN) -> None:
        self.canvas = canvas
        self.margin = margin
        self.max_line_width = canvas.page_width - margin * 2
        self.cursor = margin

    def new_page_if_needed(self, required: float) -> None:
        if self.cursor + required > self.canvas.page_height - self.margin:
            self.canvas.add_page()
            self.cursor = self.margin

    def add_space(self, space: float) -> None:
        self.cursor += space

    def add_title(self, title: str) -> None:
        self.canvas.set_font(20, "bold")
        x = (self.canvas.page_width - self.canvas.text_width(title)) / 2
        self.canvas.draw_text(title, x, self.cursor)
        self.cursor += 15

    def add_heading(self, text: str, size: float = 12) -> None:
        self.canvas.set_font(size, "bold")
        self.canvas.draw_text(text, self.margin, self.cursor)
        self.cursor += size * LINE_HEIGHT_FACTOR

    def add_text(self, text: str, size: float = 10, style: FontStyle = "normal") -> None:
        self.canvas.set_font(size, style)
        for line in self.canvas.split_text(text, self.max_line_width):
            self.new_page_if_needed(10)
            self.canvas.draw_text(line, self.margin, self.cursor)
            self.cursor += size * LINE_HEIGHT_FACTOR

    def add_formatted(self, lines: Iterable[FormattedLine]) -> None:
        for line in lines:
            match line.kind:
                case LineKind.BLANK:
                    self.add_space(4)
                case LineKind.HEADING:
                    before, size, after = HEADING_STYLES[line.level]
                    self.add_space(before)
                    self.add_heading(line.text, size)
                    self.add_space(after)
                case LineKind.BULLET:
                    self.add_text(f"  • {line.text}", 10)
                case _:
                    self.add_text(line.text, 10)

    def add_footers(self) -> None:
        total = self.canvas.page_count
        y = self.canvas.page_height - FOOTER_OFFSET
        page_label_x = self.canvas.page_width - self.margin - PAGE_LABEL_WIDTH
        for page in range(1, total + 1):
            self.canvas.set_page(page)
            self.canvas.set_font(8, "normal")
            self.canvas.draw_text(FOOTER_TEXT, self.margin, y)
            self.canvas.draw_text(f"Page {page} of {total}", page_label_x, y)


class PdfExporter:
    """
    Render a bundle and its source results into a PDF.

    Args:
        canvas_factory: Returns a fresh canvas per export, or None when no
            backend is available. Defaults to the fpdf2 canvas.
        today: Date printed in the metadata block
    """

    def __init__(
        self,
        canvas_factory: CanvasFactory | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._canvas_factory = canvas_factory or load_default_canvas
        self._today = today or date.today

    async def export(
        self,
        bundle: DocumentationBundle,
        results: Sequence[SearchResult],
    ) -> RenderedDocument:
        """Lay out the document in a worker thread (fpdf2 is synchronous)."""
        return await asyncio.to_thread(self.render, bundle, results)

    def render(
        self,
        bundle: DocumentationBundle,
        results: Sequence[SearchResult],
    ) -> RenderedDocument:
        try:
            canvas = self._canvas_factory()
            if canvas is None:
                raise RenderingUnavailableError()
            layout = PdfLayout(canvas)
            self._layout_document(layout, bundle, results)
            layout.add_footers()
            content = canvas.output()
            page_count = canvas.page_count
        except RenderingUnavailableError:
            raise
        except Exception as e:
            logger.exception("PDF rendering failed")
            raise RenderingUnavailableError(f"PDF rendering failed: {e}") from e

        logger.info(f"Rendered {page_count}-page PDF for {bundle.title!r}")
        return RenderedDocument(
            filename=export_filename(bundle.query or bundle.title, "pdf"),
            content=content,
            media_type=PDF_MEDIA_TYPE,
            page_count=page_count,
        )

    def _layout_document(
        self,
        layout: PdfLayout,
        bundle: DocumentationBundle,
        results: Sequence[SearchResult],
    ) -> None:
        layout.add_title(bundle.title)
        layout.add_space(10)

        layout.add_text(f"Generated on: {format_date(self._today())}", 10, "italic")
        layout.add_text(f"Search Results: {len(results)} sources", 10, "italic")
        layout.add_space(15)

        layout.add_heading("Table of Contents", 14)
        for entry in TABLE_OF_CONTENTS:
            layout.add_text(entry, 10)
        layout.add_space(15)

        layout.new_page_if_needed(50)
        layout.add_heading("1. Quick Guide", 14)
        layout.add_space(5)
        layout.add_formatted(parse_markdown(bundle.quick_guide))
        layout.add_space(15)

        layout.new_page_if_needed(80)
        layout.add_heading("2. Search Results Summary", 14)
        layout.add_space(5)
        for index, result in enumerate(results, start=1):
            layout.new_page_if_needed(40)
            layout.add_text(f"{index}. {result.title}", 11, "bold")
            layout.add_text(f"Source: {result.source}", 9, "italic")
            layout.add_text(f"URL: {result.url}", 9, "normal")
            layout.add_text(result.snippet, 10, "normal")
            layout.add_space(8)

        layout.new_page_if_needed(50)
        layout.add_heading("3. Complete Documentation", 14)
        layout.add_space(5)
        layout.add_formatted(parse_markdown(bundle.detailed_documentation))
