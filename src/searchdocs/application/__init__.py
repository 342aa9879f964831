"""
Application Layer - Use Cases and Pipeline Orchestration

Contains:
- search: Query validation and multi-source result aggregation
- documentation: Key point / concept extraction and Markdown templates
- export: PDF rendering with plain-text fallback
- workflow: The end-to-end user action (search → synthesize → export)
"""

from .documentation import DocumentSynthesizer
from .export import ExportService, PdfExporter, export_text, strip_markdown
from .notifications import CollectingNotifier, LoggingNotifier, Notifier
from .search import ResultAggregator, generate_filler_results, validate_query
from .workflow import SearchDocsWorkflow, SearchOutcome

__all__ = [
    # Search
    "ResultAggregator",
    "validate_query",
    "generate_filler_results",
    # Documentation
    "DocumentSynthesizer",
    # Export
    "ExportService",
    "PdfExporter",
    "export_text",
    "strip_markdown",
    # Workflow
    "SearchDocsWorkflow",
    "SearchOutcome",
    # Notifications
    "Notifier",
    "LoggingNotifier",
    "CollectingNotifier",
]
