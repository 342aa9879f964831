"""
Documentation entities - the synthesized guide and its rendered artifact.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

PDF_MEDIA_TYPE = "application/pdf"
TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class DocumentationBundle:
    """Quick guide and long-form guide generated for one query.

    ``query`` is the raw user query the bundle was built from; exporters use
    it to name the downloaded file.
    """

    title: str
    quick_guide: str
    detailed_documentation: str
    query: str = ""

    def as_plain_text(self) -> str:
        """Raw-text concatenation used by the plain-text export."""
        return f"{self.title}\n\n{self.quick_guide}\n\n{self.detailed_documentation}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "quickGuide": self.quick_guide,
            "detailedDocumentation": self.detailed_documentation,
        }


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """
    A downloadable artifact.

    ``degraded`` is True when the document is the plain-text fallback of a
    failed PDF rendering.
    """

    filename: str
    content: bytes
    media_type: str
    page_count: int = 0
    degraded: bool = False

    @property
    def is_pdf(self) -> bool:
        return self.media_type == PDF_MEDIA_TYPE

    def save(self, directory: str | Path) -> Path:
        """Write the artifact into *directory* (created if missing)."""
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / self.filename
        path.write_bytes(self.content)
        return path

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "media_type": self.media_type,
            "size_bytes": len(self.content),
            "page_count": self.page_count,
            "degraded": self.degraded,
        }
