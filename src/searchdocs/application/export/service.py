"""
ExportService - PDF export with a plain-text fallback.

Flow:
    notify "Generating PDF..." → PdfExporter.export
    ├── success → notify "Download Complete!"
    └── RenderingUnavailableError → text export, notify "PDF generation failed"

Only rendering failures are caught; anything else propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from searchdocs.application.notifications import LoggingNotifier, Notifier
from searchdocs.domain.entities import DocumentationBundle, Notification, RenderedDocument, SearchResult
from searchdocs.shared.exceptions import RenderingUnavailableError

from .pdf_exporter import PdfExporter
from .text_exporter import export_text

logger = logging.getLogger(__name__)

GENERATING_PDF = Notification("Generating PDF...", "Your documentation is being prepared...")
DOWNLOAD_COMPLETE = Notification("Download Complete!", "Your documentation has been downloaded as PDF")
PDF_FAILED = Notification("PDF generation failed", "Downloaded as text file instead", destructive=True)


class ExportService:
    def __init__(
        self,
        pdf_exporter: PdfExporter | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._pdf_exporter = pdf_exporter or PdfExporter()
        self._notifier = notifier or LoggingNotifier()

    async def export(
        self,
        bundle: DocumentationBundle,
        results: Sequence[SearchResult],
        text_only: bool = False,
    ) -> RenderedDocument:
        """
        Render *bundle* as PDF, degrading to plain text on rendering failure.

        Args:
            bundle: Synthesized documentation
            results: Results listed in the PDF's summary section
            text_only: Skip the PDF attempt entirely (no notifications)
        """
        if text_only:
            return export_text(bundle)

        self._notifier.notify(GENERATING_PDF)
        try:
            document = await self._pdf_exporter.export(bundle, results)
        except RenderingUnavailableError as e:
            logger.warning(f"PDF export unavailable, falling back to text: {e}")
            self._notifier.notify(PDF_FAILED)
            return export_text(bundle)

        self._notifier.notify(DOWNLOAD_COMPLETE)
        return document
