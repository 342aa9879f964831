"""
Documentation Application Module

Provides:
- DocumentSynthesizer: Query + results -> DocumentationBundle
- extract_key_points / extract_concepts: Snippet heuristics feeding the templates
- render_quick_guide / render_detailed_documentation: Markdown templates
"""

from .extraction import (
    STOP_WORDS,
    extract_concepts,
    extract_key_points,
    group_by_source,
)
from .synthesizer import DocumentSynthesizer
from .templates import (
    CONCEPT_DESCRIPTIONS,
    format_date,
    render_detailed_documentation,
    render_quick_guide,
)

__all__ = [
    "DocumentSynthesizer",
    "extract_key_points",
    "extract_concepts",
    "group_by_source",
    "STOP_WORDS",
    "render_quick_guide",
    "render_detailed_documentation",
    "format_date",
    "CONCEPT_DESCRIPTIONS",
]
