"""Plain-text export, used when PDF rendering is unavailable."""

from __future__ import annotations

from searchdocs.domain.entities import TEXT_MEDIA_TYPE, DocumentationBundle, RenderedDocument
from searchdocs.shared.text import export_filename


def export_text(bundle: DocumentationBundle) -> RenderedDocument:
    """Raw Markdown of both guides under the title, UTF-8 encoded."""
    return RenderedDocument(
        filename=export_filename(bundle.query or bundle.title, "txt"),
        content=bundle.as_plain_text().encode("utf-8"),
        media_type=TEXT_MEDIA_TYPE,
        degraded=True,
    )
