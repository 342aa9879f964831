"""
Export Application Module

Provides:
- ExportService: PDF export with plain-text fallback and notifications
- PdfExporter / PdfLayout: Cursor-based PDF layout over a DocumentCanvas
- export_text: Plain-text rendering of a bundle
- strip_markdown: Inline Markdown removal
"""

from .markdown import FormattedLine, LineKind, classify_line, parse_markdown, strip_markdown
from .pdf_exporter import PdfExporter, PdfLayout, load_default_canvas
from .service import ExportService
from .text_exporter import export_text

__all__ = [
    "ExportService",
    "PdfExporter",
    "PdfLayout",
    "load_default_canvas",
    "export_text",
    "strip_markdown",
    "classify_line",
    "parse_markdown",
    "FormattedLine",
    "LineKind",
]
