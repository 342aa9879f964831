"""
Document rendering capability.

The exporter only talks to this protocol; the concrete backend is chosen by
the DI container (fpdf2 by default).
"""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

FontStyle = Literal["normal", "bold", "italic"]


@runtime_checkable
class DocumentCanvas(Protocol):
    """Page-oriented drawing surface measured in millimetres."""

    page_width: float
    page_height: float

    def add_page(self) -> None: ...

    def set_font(self, size: float, style: FontStyle = "normal") -> None: ...

    def text_width(self, text: str) -> float: ...

    def split_text(self, text: str, max_width: float) -> list[str]: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    @property
    def page_count(self) -> int: ...

    def set_page(self, page_number: int) -> None: ...

    def output(self) -> bytes: ...
