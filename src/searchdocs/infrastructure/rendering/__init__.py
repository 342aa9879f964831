"""Rendering backends for exported documents."""

from .canvas import DocumentCanvas, FontStyle

__all__ = ["DocumentCanvas", "FontStyle"]
