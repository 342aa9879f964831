"""Tests for ExportService — PDF with plain-text fallback."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from searchdocs.application.export import ExportService, PdfExporter, export_text
from searchdocs.application.notifications import CollectingNotifier
from searchdocs.domain.entities import TEXT_MEDIA_TYPE, RenderedDocument
from searchdocs.shared.exceptions import RenderingUnavailableError


class TestExportText:
    def test_plain_text_document(self, sample_bundle):
        document = export_text(sample_bundle)
        assert document.filename == "rust_lang_documentation.txt"
        assert document.media_type == TEXT_MEDIA_TYPE
        assert document.degraded
        assert document.page_count == 0
        assert document.content.decode("utf-8") == (
            f"{sample_bundle.title}\n\n{sample_bundle.quick_guide}\n\n{sample_bundle.detailed_documentation}"
        )

    def test_save(self, sample_bundle, tmp_path):
        path = export_text(sample_bundle).save(tmp_path / "out")
        assert path == tmp_path / "out" / "rust_lang_documentation.txt"
        assert path.read_text(encoding="utf-8").startswith("Complete Guide to rust lang\n\n")


class TestExportService:
    @pytest.mark.asyncio
    async def test_pdf_success(self, fake_canvas, fixed_today, sample_bundle):
        notifier = CollectingNotifier()
        service = ExportService(PdfExporter(canvas_factory=lambda: fake_canvas, today=fixed_today), notifier)

        document = await service.export(sample_bundle, [])

        assert document.is_pdf
        assert [n.title for n in notifier.notifications] == ["Generating PDF...", "Download Complete!"]
        assert notifier.notifications[0].description == "Your documentation is being prepared..."
        assert notifier.notifications[1].description == "Your documentation has been downloaded as PDF"

    @pytest.mark.asyncio
    async def test_fallback_when_backend_missing(self, fixed_today, sample_bundle):
        notifier = CollectingNotifier()
        service = ExportService(PdfExporter(canvas_factory=lambda: None, today=fixed_today), notifier)

        document = await service.export(sample_bundle, [])

        assert document.degraded
        assert document.media_type == TEXT_MEDIA_TYPE
        assert document.content == sample_bundle.as_plain_text().encode("utf-8")
        failed = notifier.notifications[-1]
        assert failed.title == "PDF generation failed"
        assert failed.description == "Downloaded as text file instead"
        assert failed.destructive

    @pytest.mark.asyncio
    async def test_text_only_skips_pdf(self, sample_bundle):
        exporter = MagicMock()
        exporter.export = AsyncMock()
        notifier = CollectingNotifier()

        document = await ExportService(exporter, notifier).export(sample_bundle, [], text_only=True)

        exporter.export.assert_not_called()
        assert document.filename.endswith(".txt")
        assert notifier.notifications == []

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, sample_bundle):
        exporter = MagicMock()
        exporter.export = AsyncMock(side_effect=KeyError("bug"))

        with pytest.raises(KeyError):
            await ExportService(exporter, CollectingNotifier()).export(sample_bundle, [])

    @pytest.mark.asyncio
    async def test_rendering_error_from_mock(self, sample_bundle):
        exporter = MagicMock()
        exporter.export = AsyncMock(side_effect=RenderingUnavailableError())

        document = await ExportService(exporter, CollectingNotifier()).export(sample_bundle, [])

        assert isinstance(document, RenderedDocument)
        assert document.degraded
