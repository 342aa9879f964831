"""
fpdf2 backend for :class:`DocumentCanvas`.

Core PDF fonts (Helvetica) are single-byte WinAnsi fonts, so text is mapped
through cp1252 before drawing; characters outside it become ``?``.
"""

from __future__ import annotations

import logging

from fpdf import FPDF
from fpdf.enums import MethodReturnValue

from .canvas import FontStyle

logger = logging.getLogger(__name__)

A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0
FONT_FAMILY = "helvetica"

_STYLE_CODES: dict[str, str] = {"normal": "", "bold": "B", "italic": "I"}


def to_winansi(text: str) -> str:
    """Map *text* onto the single-byte range the core fonts can encode."""
    return text.encode("cp1252", errors="replace").decode("latin-1")


class FpdfCanvas:
    """A4 portrait canvas drawing with absolute positions (no auto page break)."""

    def __init__(self) -> None:
        self._pdf = FPDF(orientation="P", unit="mm", format="A4")
        self._pdf.set_auto_page_break(auto=False)
        self._pdf.set_margins(0, 0, 0)
        self._pdf.set_font(FONT_FAMILY, size=10)
        self.page_width = A4_WIDTH_MM
        self.page_height = A4_HEIGHT_MM
        self._pdf.add_page()

    def add_page(self) -> None:
        self._pdf.add_page()

    def set_font(self, size: float, style: FontStyle = "normal") -> None:
        self._pdf.set_font(FONT_FAMILY, style=_STYLE_CODES.get(style, ""), size=size)

    def text_width(self, text: str) -> float:
        return self._pdf.get_string_width(to_winansi(text))

    def split_text(self, text: str, max_width: float) -> list[str]:
        """Wrap *text* to *max_width* using the current font."""
        if not text:
            return [""]
        lines = self._pdf.multi_cell(
            w=max_width,
            h=5,
            text=to_winansi(text),
            dry_run=True,
            output=MethodReturnValue.LINES,
        )
        return list(lines) or [""]

    def draw_text(self, text: str, x: float, y: float) -> None:
        self._pdf.text(x, y, to_winansi(text))

    @property
    def page_count(self) -> int:
        return self._pdf.pages_count

    def set_page(self, page_number: int) -> None:
        self._pdf.page = page_number

    def output(self) -> bytes:
        return bytes(self._pdf.output())


def create_fpdf_canvas() -> FpdfCanvas:
    return FpdfCanvas()
